"""
Advisory service used to annotate the deterministic pipeline stages.

The feature engineer asks it for a description of the feature engineering
steps and the explainer asks it for attributions and a rationale. Callers
always go through ``consult`` so that failures and timeouts surface as
``AdvisoryServiceError`` and can be replaced with a fallback value.
"""

from typing import Any, Dict, Optional, Protocol
from exodetect.exceptions import AdvisoryServiceError
from .rationale import summarize_attributions
import asyncio
import logging
import requests

logger = logging.getLogger(__name__)

FEATURE_ENGINEERING_STEPS = "feature_engineering_steps"
EXPLAIN_PREDICTION = "explain_prediction"


class AdvisoryService(Protocol):
    async def generate(self, task: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        ...


class LocalAdvisoryService:
    """Rule-based advisor that answers in-process"""

    async def generate(self, task: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        if task == FEATURE_ENGINEERING_STEPS:
            return {"steps": self._describe_steps(payload)}
        if task == EXPLAIN_PREDICTION:
            return {"rationale": self._describe_prediction(payload)}
        raise AdvisoryServiceError(f"Unknown advisory task: {task}")

    def _describe_steps(self, payload):
        return (
            f"Missing data strategy: {payload['missingDataStrategy']}. "
            f"Normalization strategy: {payload['normalizationStrategy']}. "
            "Features extracted and cleaned."
        )

    def _describe_prediction(self, payload):
        return summarize_attributions(
            payload["prediction"],
            payload["modelType"],
            payload.get("explanationType", ""),
            payload.get("attributions") or {}
        )


class HttpAdvisoryService:
    """Advisor backed by a remote generation endpoint"""

    def __init__(self, url: str, api_key: Optional[str] = None, timeout: float = 10.0):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    async def generate(self, task: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await asyncio.to_thread(self._post, task, payload)

    def _post(self, task, payload):
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        r = requests.post(
            self.url,
            json={"task": task, "input": payload},
            headers=headers,
            timeout=self.timeout
        )
        r.raise_for_status()
        body = r.json()
        if not isinstance(body, dict):
            raise AdvisoryServiceError(f"Advisory task '{task}' returned {type(body).__name__}, expected an object")
        return body


async def consult(
    service: AdvisoryService,
    task: str,
    payload: Dict[str, Any],
    timeout: float
) -> Dict[str, Any]:
    """Run one advisory task bounded by ``timeout`` seconds"""
    try:
        response = await asyncio.wait_for(service.generate(task, payload), timeout=timeout)
    except AdvisoryServiceError:
        raise
    except asyncio.TimeoutError as e:
        raise AdvisoryServiceError(f"Advisory task '{task}' timed out after {timeout}s", cause=e) from e
    except Exception as e:
        raise AdvisoryServiceError(f"Advisory task '{task}' failed: {e}", cause=e) from e

    if not isinstance(response, dict):
        raise AdvisoryServiceError(f"Advisory task '{task}' returned {type(response).__name__}, expected an object")
    return response


def build_advisory_service(settings) -> AdvisoryService:
    """Remote advisor when ADVISORY_URL is configured, local otherwise"""
    if settings.advisory_url:
        logger.info("Using remote advisory service at %s", settings.advisory_url)
        return HttpAdvisoryService(
            settings.advisory_url,
            api_key=settings.advisory_api_key,
            timeout=settings.advisory_timeout_seconds
        )
    return LocalAdvisoryService()
