"""
Users module configuration.
고객/관리자 계정 및 토큰 인증.
"""
from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.users'
    label = 'users'
    verbose_name = 'Users'
