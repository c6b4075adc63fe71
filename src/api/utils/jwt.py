from typing import Optional
import logging

from jose import JWTError, jwt

from config import ApplicationConfig

logger = logging.getLogger(__name__)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode a staff access token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict with user_id (the staff id), or None if invalid
    """
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"])
        logger.debug(f"JWT verification successful for user_id: {payload.get('user_id')}")
        return payload
    except JWTError as e:
        logger.warning(f"JWT verification failed: {type(e).__name__} - {str(e)}")
        return None


def create_jwt(payload: dict) -> str:
    """Sign a payload with the configured secret (HS256)"""
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")
