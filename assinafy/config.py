import os
from typing import Any, Dict

from .exceptions import ValidationError

ASSINAFY_API_URL = 'https://api.assinafy.com.br/v1/'

# Request timeouts (seconds)
DEFAULT_TIMEOUT = 30
UPLOAD_TIMEOUT = 60


class Config:
    """ASSINAFY_* settings, read from the environment when requested."""

    @staticmethod
    def load() -> Dict[str, Any]:
        timeout = os.getenv('ASSINAFY_TIMEOUT')
        try:
            timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValidationError(f"Invalid ASSINAFY_TIMEOUT: {timeout!r}", field='timeout')

        return {
            'token': os.getenv('ASSINAFY_API_TOKEN', ''),
            'account_id': os.getenv('ASSINAFY_ACCOUNT_ID') or None,
            'base_url': os.getenv('ASSINAFY_API_URL') or ASSINAFY_API_URL,
            'timeout': timeout,
        }
