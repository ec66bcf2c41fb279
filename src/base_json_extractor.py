"""
Base classes for JSON-based extractors (local disk and Tigris/S3).

Provides common functionality for storage backends that keep the article
collection as a single JSON document.
"""
import json
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.errors import PersistenceError
from src.file_utils import dump_json, read_text_file, save_json_file


def parse_article_collection(text: str, source: str) -> List[Dict[str, Any]]:
    """
    Parse a serialized article collection.

    Args:
        text: JSON text; blank text means an empty collection
        source: Where the text came from, used in error messages

    Returns:
        List of article dicts

    Raises:
        PersistenceError: If the text is not a JSON array of objects
    """
    if not text.strip():
        return []
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise PersistenceError(f"Invalid JSON in {source}.", str(exc)) from exc
    if not isinstance(data, list) or not all(isinstance(a, dict) for a in data):
        raise PersistenceError(f"{source} does not hold a list of articles.")
    return data


class BaseLocalDiskExtractor(ABC):
    """
    Base class for local disk storage extractors.

    Provides common functionality for storing JSON data on local filesystem.
    """

    def __init__(self, state_dir: str = "state"):
        """
        Initialize local disk extractor.

        Args:
            state_dir: Directory for storing state files (default: "state")
        """
        self.state_dir = state_dir
        os.makedirs(self.state_dir, exist_ok=True)

    @abstractmethod
    def _get_filename(self) -> str:
        """
        Get the filename for this extractor's storage.

        Returns:
            Filename (e.g., "data.json")
        """

    def _get_filepath(self) -> str:
        """Get the full file path for storage."""
        return os.path.join(self.state_dir, self._get_filename())

    def _load_text(self) -> str:
        """
        Read the raw storage file.

        Returns:
            File contents, empty string if the file doesn't exist
        """
        try:
            return read_text_file(self._get_filepath())
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Could not read {self._get_filepath()}.", str(exc)) from exc

    def _save_data(self, data: Any, ensure_dir: bool = True) -> None:
        """
        Save JSON data to file.

        Args:
            data: Data to save
            ensure_dir: Whether to create parent directory if it doesn't exist
        """
        try:
            save_json_file(self._get_filepath(), data, ensure_dir=ensure_dir)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Could not write {self._get_filepath()}.", str(exc)) from exc


class BaseTigrisExtractor(ABC):
    """
    Base class for Tigris/S3-compatible storage extractors.

    Provides common functionality for S3-compatible object storage.
    """

    def __init__(
        self,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        bucket_name: Optional[str] = None,
        region: Optional[str] = None
    ):
        """
        Initialize Tigris extractor.

        Args:
            access_key_id: AWS access key ID (defaults to AWS_ACCESS_KEY_ID env var)
            secret_access_key: AWS secret access key (defaults to AWS_SECRET_ACCESS_KEY env var)
            endpoint_url: S3 endpoint URL (defaults to AWS_ENDPOINT_URL_S3 or
                         https://fly.storage.tigris.dev)
            bucket_name: S3 bucket name (defaults to TIGRIS_BUCKET_NAME env var)
            region: AWS region (defaults to AWS_REGION or 'auto')
        """
        self.access_key_id = access_key_id or os.getenv('AWS_ACCESS_KEY_ID')
        self.secret_access_key = secret_access_key or os.getenv('AWS_SECRET_ACCESS_KEY')
        self.endpoint_url = (
            endpoint_url or
            os.getenv('AWS_ENDPOINT_URL_S3', 'https://fly.storage.tigris.dev')
        )
        self.bucket_name = bucket_name or os.getenv('TIGRIS_BUCKET_NAME')
        self.region = region or os.getenv('AWS_REGION', 'auto')

        if not self.access_key_id or not self.secret_access_key:
            raise ValueError(
                "AWS credentials are required. Set AWS_ACCESS_KEY_ID and "
                "AWS_SECRET_ACCESS_KEY environment variables or pass them as parameters."
            )

        if not self.bucket_name:
            raise ValueError(
                "Bucket name is required. Set TIGRIS_BUCKET_NAME environment variable "
                "or pass it as a parameter."
            )

        self.s3_client = boto3.client(
            's3',
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            endpoint_url=self.endpoint_url,
            region_name=self.region
        )

    @abstractmethod
    def _get_object_key(self) -> str:
        """
        Get the S3 object key for this extractor's storage.

        Returns:
            Object key (e.g., "state/data.json")
        """

    def _load_text_from_s3(self) -> str:
        """
        Load the raw JSON text of the S3 object.

        Returns:
            Object body, empty string if the object doesn't exist
        """
        try:
            response = self.s3_client.get_object(
                Bucket=self.bucket_name,
                Key=self._get_object_key()
            )
            return response['Body'].read().decode('utf-8')
        except ClientError as e:
            if e.response['Error']['Code'] == 'NoSuchKey':
                return ""
            raise PersistenceError(
                f"Could not read s3://{self.bucket_name}/{self._get_object_key()}.", str(e)
            ) from e
        except BotoCoreError as e:
            raise PersistenceError(
                f"Could not read s3://{self.bucket_name}/{self._get_object_key()}.", str(e)
            ) from e

    def _save_to_s3(self, data: Any) -> None:
        """
        Save JSON data to S3 object.

        Args:
            data: Data to save (will be JSON encoded)
        """
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=self._get_object_key(),
                Body=dump_json(data),
                ContentType='application/json',
                CacheControl='no-cache, no-store, must-revalidate'
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(
                f"Could not write s3://{self.bucket_name}/{self._get_object_key()}.", str(e)
            ) from e
