"""
Transifex API Client

Minimal client used to check that stored Transifex credentials are accepted.
"""

import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'https://www.transifex.com/api/2/projects/'


class TransifexAPI:
    """
    Transifex API client bound to one set of credentials.

    Args:
        username: Transifex account name
        password: Transifex account password
        api_url: Endpoint requested to check the credentials
        timeout: Request timeout in seconds (default 10)
    """

    def __init__(self, username, password, api_url=DEFAULT_API_URL, timeout=10):
        self.username = username or ''
        self.password = password or ''
        self.api_url = api_url
        self.timeout = timeout

    def verify_credentials(self):
        """
        Check the credentials with a single authenticated request.

        Returns:
            True if the API accepted the credentials, False otherwise.
            Network errors count as not verified.
        """
        if not self.username or not self.password:
            return False

        try:
            response = requests.get(
                self.api_url,
                auth=(self.username, self.password),
                headers={'Accept': 'application/json'},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Transifex credential check failed for %s: %s", self.username, e)
            return False

        if 200 <= response.status_code < 300:
            logger.info("Transifex credentials verified for %s", self.username)
            return True

        logger.info("Transifex rejected credentials for %s (HTTP %s)", self.username, response.status_code)
        return False
