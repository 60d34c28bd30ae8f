from functools import lru_cache

from fastapi import Depends

from security_service.config import settings
from security_service.messaging.provider import MessagingServiceProvider, create_provider
from security_service.models.records import OtpRecord, PasswordRecord
from security_service.services.otp_service import OtpService
from security_service.services.password_service import PasswordService
from security_service.storage.repository import InMemoryRepository, Repository, SupabaseRepository
from security_service.storage.supabase import get_supabase


@lru_cache(maxsize=1)
def get_otp_repository() -> Repository[OtpRecord]:
    if settings.storage_backend == "supabase":
        return SupabaseRepository(get_supabase(), settings.otp_table, OtpRecord, "token")
    return InMemoryRepository(OtpRecord, "token")


@lru_cache(maxsize=1)
def get_password_repository() -> Repository[PasswordRecord]:
    if settings.storage_backend == "supabase":
        return SupabaseRepository(get_supabase(), settings.password_table, PasswordRecord, "id")
    return InMemoryRepository(PasswordRecord, "id")


@lru_cache(maxsize=1)
def get_messaging_provider() -> MessagingServiceProvider:
    return create_provider(settings)


def get_otp_service(
    repository: Repository[OtpRecord] = Depends(get_otp_repository),
    messaging: MessagingServiceProvider = Depends(get_messaging_provider),
) -> OtpService:
    return OtpService(
        repository,
        messaging,
        ttl_minutes=settings.otp_expire_minutes,
        code_length=settings.otp_length,
        single_use=settings.otp_single_use,
    )


def get_password_service(
    repository: Repository[PasswordRecord] = Depends(get_password_repository),
) -> PasswordService:
    return PasswordService(repository)
