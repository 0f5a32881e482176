"""
API client for communicating with the Succession Advisor FastAPI backend
"""

import requests
from typing import Dict, Any, List
from urllib.parse import urljoin


class APIError(Exception):
    """Custom exception for API-related errors"""
    pass


class SuccessionAdvisorClient:
    """Client for interacting with the Succession Advisor FastAPI endpoints"""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: int = 30):
        """
        Initialize the API client

        Args:
            base_url: Base URL of the FastAPI server
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

        # Set default headers
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        })

    def _make_request(self, method: str, endpoint: str, **kwargs) -> Dict[str, Any]:
        """
        Make an HTTP request to the API

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            **kwargs: Additional arguments for requests

        Returns:
            Response JSON data

        Raises:
            APIError: If the request fails
        """
        url = urljoin(self.base_url + '/', endpoint.lstrip('/'))

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
        except requests.exceptions.Timeout:
            raise APIError(f"Request timed out after {self.timeout} seconds")
        except requests.exceptions.ConnectionError:
            raise APIError(f"Could not connect to API server at {self.base_url}")
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request failed: {e}")

        try:
            payload = response.json()
        except ValueError:
            raise APIError("Invalid JSON response from server")

        if response.status_code >= 400:
            error = payload.get('error', 'Request failed') if isinstance(payload, dict) else 'Request failed'
            missing = payload.get('missing_fields') if isinstance(payload, dict) else None
            if missing:
                error = f"{error}: {', '.join(missing)}"
            raise APIError(f"HTTP {response.status_code}: {error}")

        return payload

    def analyse(self, answers: Dict[str, Any]) -> Dict[str, Any]:
        """
        Submit questionnaire answers and get the succession analysis

        Args:
            answers: Questionnaire fields; None values are left out

        Returns:
            Analysis result as returned by the API
        """
        body = {key: value for key, value in answers.items() if value is not None}
        return self._make_request('POST', '/api/analyse', json=body)

    def statistics(self) -> Dict[str, Any]:
        return self._make_request('GET', '/api/statistiken')

    def next_question(self, conversation: List[Dict[str, str]]) -> Dict[str, Any]:
        return self._make_request('POST', '/api/chatbot/next', json={"conversation": conversation})

    def finalize(self, conversation: List[Dict[str, str]]) -> Dict[str, Any]:
        response = self._make_request('POST', '/api/chatbot/finalize', json={"conversation": conversation})
        return response.get('analysis', {})
