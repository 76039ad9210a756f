"""Profile read and update against the users collection"""

import logging

from shared.identity import AuthStore
from shared.records import RecordStoreClient
from ..models.profile import Profile, ProfileUpdateRequest

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


class ProfileService:
    """Profile of the signed-in user"""

    def __init__(self, client: RecordStoreClient):
        self.client = client

    async def get_profile(self, auth: AuthStore) -> Profile:
        """Get the current user's profile"""
        record = await self.client.get_one(USERS_COLLECTION, auth.user_id, token=auth.token)
        return Profile.model_validate(record)

    async def update_profile(self, auth: AuthStore, request: ProfileUpdateRequest) -> Profile:
        """Update profile fields and refresh the identity held by the session"""
        changes = request.model_dump(exclude_none=True)
        if not changes:
            return await self.get_profile(auth)

        record = await self.client.update(
            USERS_COLLECTION, auth.user_id, changes, token=auth.token
        )
        auth.save(auth.token, record)
        logger.info(f"Updated profile of user {auth.user_id}: {', '.join(changes)}")

        return Profile.model_validate(record)
