"""
Base test fixtures and helpers for extractor tests.

Provides common test patterns for local disk and Tigris article storage.
"""
import json
import os
import shutil
import tempfile
from unittest.mock import Mock, MagicMock

import pytest


class BaseLocalDiskExtractorTests:
    """Base test class for local disk extractors."""

    @pytest.fixture
    def temp_state_dir(self):
        """Create a temporary state directory."""
        temp_dir = tempfile.mkdtemp()
        state_dir = os.path.join(temp_dir, "state")
        os.makedirs(state_dir, exist_ok=True)
        yield state_dir
        shutil.rmtree(temp_dir)


class BaseTigrisExtractorTests:
    """Base test class for Tigris extractors."""

    @pytest.fixture
    def mock_s3_client(self):
        """Create a mock boto3 S3 client."""
        mock_client = MagicMock()
        return mock_client

    def setup_mock_get_object(self, mock_s3_client, data):
        """
        Helper to setup mock get_object response.

        Args:
            mock_s3_client: Mock S3 client
            data: Data to return from get_object (str is returned verbatim)
        """
        body = data if isinstance(data, str) else json.dumps(data)
        mock_body = Mock()
        mock_body.read.return_value = body.encode('utf-8')
        mock_s3_client.get_object.return_value = {"Body": mock_body}

    def setup_mock_client_error(self, mock_s3_client, code, operation='GetObject'):
        """
        Helper to make the mock S3 client raise a ClientError.

        Args:
            mock_s3_client: Mock S3 client
            code: S3 error code (e.g. 'NoSuchKey', 'AccessDenied')
            operation: Operation name reported by the error
        """
        from botocore.exceptions import ClientError
        error_response = {'Error': {'Code': code}}
        error = ClientError(error_response, operation)
        if operation == 'GetObject':
            mock_s3_client.get_object.side_effect = error
        else:
            mock_s3_client.put_object.side_effect = error
