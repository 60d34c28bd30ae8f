from dataclasses import dataclass


@dataclass
class OtpRecord:
    token: str
    code: str
    address: str
    channel: str
    expires: int
    created: int


@dataclass
class PasswordRecord:
    id: int
    hash: str
    created: int
    updated: int
