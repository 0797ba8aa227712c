# app/infrastructure/db/supabase_client.py
from typing import Callable

from fastapi import Depends
from supabase import Client, create_client

from app.core.config import Settings, get_settings

ClientFactory = Callable[[], Client]


def create_admin_client(settings: Settings) -> Client:
    # service role 키 사용 -> 서버에서만 사용할 것
    return create_client(settings.supabase_url, settings.service_role_key)


def get_admin_client_factory(settings: Settings = Depends(get_settings)) -> ClientFactory:
    """
    요청마다 새 admin 클라이언트를 만드는 팩토리
    - 생성 자체의 실패도 엔드포인트에서 500으로 처리되도록 호출은 엔드포인트에 맡김
    """
    return lambda: create_admin_client(settings)
