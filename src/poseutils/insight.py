"""
Natural-language insight on a decomposition, delegated to an external
text-generation service (generative language REST API).

Nothing in the numeric core depends on this module.
"""

import logging
import os
import textwrap

import httpx

from .decomposition import DecompositionResult
from .parameters import DEFAULT_PARAMS

FALLBACK_ANALYSIS_TEXT = "Could not perform AI analysis at this time."
EMPTY_ANALYSIS_TEXT = "No analysis available."

logger = logging.getLogger(__name__)


class InsightError(Exception):
    """Raised when the text-generation service gives no usable text."""


def build_analysis_prompt(result: DecompositionResult) -> str:
    """Serialise a decomposition into the expert analysis prompt."""
    m = result.matrix
    t = result.translation
    deg = result.euler_degrees
    return textwrap.dedent(
        f"""\
        As a robotics and computer vision expert, analyze this 3x4 transformation matrix data:

        Translation (X, Y, Z): {t.x}, {t.y}, {t.z}
        Euler Angles (Degrees - Roll, Pitch, Yaw): {deg.roll}, {deg.pitch}, {deg.yaw}

        Rotation Matrix:
        [{m.r11}, {m.r12}, {m.r13}]
        [{m.r21}, {m.r22}, {m.r23}]
        [{m.r31}, {m.r32}, {m.r33}]

        Please provide:
        1. A brief interpretation of what this orientation looks like (e.g., "pointing mostly forward but tilted slightly down").
        2. Check if the rotation matrix is orthogonal (unitary check).
        3. Potential physical context (is this a typical camera pose, sensor mount, etc?).
        4. Mathematical summary of the transformation.

        Keep the explanation professional and concise.
        """  # noqa: E501
    )


def extract_text(payload: dict) -> str:
    """
    Join the text parts of the first candidate of a generateContent
    response.

    Raises:
        InsightError: if the payload has no candidate or is not shaped
            like a generateContent response.
    """
    if not isinstance(payload, dict):
        raise InsightError(f"Unexpected response: {payload}")
    candidates = payload.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        raise InsightError(f"No candidate in response: {payload}")

    candidate = candidates[0]
    content = candidate.get("content") if isinstance(candidate, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not all(
            isinstance(part, dict) and isinstance(part.get("text", ""), str)
            for part in parts
    ):
        raise InsightError(f"Malformed candidate in response: {payload}")

    return "".join(part.get("text", "") for part in parts)


def request_analysis(
        prompt: str,
        insight_params: dict,
        client: httpx.Client
) -> str:
    """
    Send the prompt to the generateContent endpoint and return the
    generated text.

    Raises:
        InsightError: if the API key is missing or the response holds
            no candidate.
        httpx.HTTPError: if the request fails.
    """
    api_key = os.environ.get(insight_params["api_key_env"])
    if not api_key:
        raise InsightError(
            f"Environment variable {insight_params['api_key_env']} "
            "is not set."
        )
    url = (
        f"{insight_params['endpoint'].rstrip('/')}/models/"
        f"{insight_params['model']}:generateContent"
    )
    response = client.post(
        url,
        headers={"x-goog-api-key": api_key},
        json={"contents": [{"parts": [{"text": prompt}]}]},
        timeout=insight_params["timeout"],
    )
    response.raise_for_status()
    return extract_text(response.json())


def analyse_spatial_context(
        result: DecompositionResult,
        params: dict = None,
        client: httpx.Client = None
) -> str:
    """
    Ask the text-generation service for an expert reading of the
    decomposition.

    Args:
        result (DecompositionResult): the decomposition to analyse.
        params (dict, optional): the full parameter dictionary, only the
            "insight" entry is used. Defaults to DEFAULT_PARAMS.
        client (httpx.Client, optional): the HTTP client to use. A
            temporary one is created if None. Defaults to None.

    Returns:
        str: the generated text, EMPTY_ANALYSIS_TEXT if the service
        returned no text, or FALLBACK_ANALYSIS_TEXT on any failure.
    """
    if params is None:
        params = DEFAULT_PARAMS
    insight_params = params["insight"]
    prompt = build_analysis_prompt(result)

    try:
        if client is None:
            with httpx.Client() as temporary_client:
                text = request_analysis(
                    prompt, insight_params, temporary_client
                )
        else:
            text = request_analysis(prompt, insight_params, client)
    except (httpx.HTTPError, InsightError, ValueError) as e:
        # ValueError covers a body that is not valid JSON
        logger.error(f"Spatial analysis error: {e}")
        return FALLBACK_ANALYSIS_TEXT

    logger.debug(f"Analysis received from {insight_params['model']}.")
    return text or EMPTY_ANALYSIS_TEXT
