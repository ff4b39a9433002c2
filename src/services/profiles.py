"""
Profile service for the authenticated user's personal details.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError

from src.models.profile import Profile, ProfileUpdate
from src.services.exceptions import RecordStoreError
from src.utils.dynamo import create_pk, create_profile_sk, get_dynamo
from src.utils.logging import logger


def _profile_key(user_id: str) -> dict:
    return {
        "PK": create_pk(user_id),
        "SK": create_profile_sk()
    }


def get_profile(user_id: str) -> Optional[Profile]:
    """
    Get a user's profile.

    Returns:
        Profile if one has been saved, None otherwise

    Raises:
        RecordStoreError: If the store cannot be read or the stored row is invalid
    """
    try:
        item = get_dynamo().get_item(_profile_key(user_id))
    except Exception as e:
        logger.error("Error retrieving profile", extra={
            "user_id": user_id,
            "error": str(e),
            "error_type": e.__class__.__name__
        })
        raise RecordStoreError(f"Failed to retrieve profile: {str(e)}") from e

    if not item:
        return None
    try:
        return Profile(**{k: v for k, v in item.items() if k not in ("PK", "SK")})
    except ValidationError as e:
        logger.error("Stored profile is invalid", extra={
            "user_id": user_id,
            "error_count": e.error_count()
        })
        raise RecordStoreError(f"Stored profile is invalid: {str(e)}") from e


def save_profile(user_id: str, data: ProfileUpdate) -> Profile:
    """
    Create or update a user's profile.

    Args:
        user_id: Owning user's identifier
        data: Profile fields, names already trimmed by validation

    Returns:
        The stored profile
    """
    existing = get_profile(user_id)
    now = datetime.now(timezone.utc)
    profile = Profile(
        user_id=user_id,
        created_at=existing.created_at if existing else now,
        updated_at=now,
        **data.model_dump()
    )

    try:
        get_dynamo().put_item({
            **_profile_key(user_id),
            **profile.model_dump(mode="json")
        })
    except Exception as e:
        logger.error("Error saving profile", extra={
            "user_id": user_id,
            "error": str(e),
            "error_type": e.__class__.__name__
        })
        raise RecordStoreError(f"Failed to save profile: {str(e)}") from e

    logger.info("Saved profile", extra={
        "user_id": user_id,
        "is_new": existing is None
    })
    return profile


def get_initials(profile: Optional[Profile], email: Optional[str] = None) -> str:
    """
    Get initials for the profile avatar.

    Uses the first letters of the first and last name when either is set,
    otherwise the first letter of the email, otherwise "U".
    """
    if profile and (profile.first_name or profile.last_name):
        return f"{profile.first_name[:1]}{profile.last_name[:1]}".upper()
    email = email or (profile.email if profile else None)
    if email:
        return email[0].upper()
    return "U"
