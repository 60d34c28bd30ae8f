from enum import Enum


class ErrorURN(str, Enum):
    OTP_ADDRESS_TYPE_NOT_VALID = "urn:wutsi:error:security:otp-address-type-not-valid"
    OTP_NOT_FOUND = "urn:wutsi:error:security:otp-not-found"
    OTP_EXPIRED = "urn:wutsi:error:security:otp-expired"
    OTP_NOT_VALID = "urn:wutsi:error:security:otp-not-valid"
    OTP_DISPATCH_FAILED = "urn:wutsi:error:security:otp-dispatch-failed"
    PASSWORD_NOT_FOUND = "urn:wutsi:error:security:password-not-found"
    PASSWORD_MISMATCH = "urn:wutsi:error:security:password-mismatch"


class SecurityError(Exception):
    """Base class for errors surfaced to API callers with an error URN."""

    urn: ErrorURN
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidChannelTypeError(SecurityError):
    urn = ErrorURN.OTP_ADDRESS_TYPE_NOT_VALID
    status_code = 400


class OtpNotFoundError(SecurityError):
    urn = ErrorURN.OTP_NOT_FOUND
    status_code = 404


class OtpExpiredError(SecurityError):
    urn = ErrorURN.OTP_EXPIRED
    status_code = 409


class OtpCodeMismatchError(SecurityError):
    urn = ErrorURN.OTP_NOT_VALID
    status_code = 409


class DispatchFailureError(SecurityError):
    """The OTP was stored but the messaging channel did not accept it."""

    urn = ErrorURN.OTP_DISPATCH_FAILED
    status_code = 502

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class PasswordNotFoundError(SecurityError):
    urn = ErrorURN.PASSWORD_NOT_FOUND
    status_code = 404


class PasswordMismatchError(SecurityError):
    urn = ErrorURN.PASSWORD_MISMATCH
    status_code = 409
