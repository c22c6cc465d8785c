"""Pytest 설정 및 공통 Fixtures"""

import boto3
import pytest
from django.contrib.auth import get_user_model
from faker import Faker
from moto import mock_aws
from rest_framework.test import APIClient

from apps.accounts.services import TokenService

User = get_user_model()
fake = Faker()


@pytest.fixture
def api_client():
    """API 클라이언트"""
    return APIClient()


@pytest.fixture
def create_user(db):
    """유저 생성 팩토리 (Faker 데이터)"""

    def _create_user(**kwargs):
        defaults = {
            "email": fake.unique.email(),
            "name": fake.first_name()[:30],
            "password": "secret123",
        }
        defaults.update(kwargs)
        return User.objects.create_user(**defaults)

    return _create_user


@pytest.fixture
def bearer_client(api_client):
    """유저 토큰을 Authorization 헤더로 싣는 클라이언트"""

    def _bearer_client(user):
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {TokenService().generate_token(user)}")
        return api_client

    return _bearer_client


@pytest.fixture
def s3_mock():
    """S3 Mock 설정"""
    with mock_aws():
        s3_client = boto3.client(
            "s3",
            region_name="ap-northeast-2",
            aws_access_key_id="test",
            aws_secret_access_key="test",
        )
        s3_client.create_bucket(
            Bucket="test-bucket",
            CreateBucketConfiguration={"LocationConstraint": "ap-northeast-2"},
        )
        yield s3_client
