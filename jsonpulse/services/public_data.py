"""Read-only access to a user's files through their API key."""

import logging

from sqlalchemy.orm import Session

from jsonpulse.exceptions import NotFoundError
from jsonpulse.models.json_file import JsonFile
from jsonpulse.models.user import User

logger = logging.getLogger(__name__)


class PublicDataService:
    """Resolves ``(apiKey, fileName)`` to stored documents.

    There is no ownership check beyond possession of the owner's current key.
    A revoked key and a key that never existed look the same.
    """

    def __init__(self, db: Session):
        self.db = db

    def owner_for_key(self, api_key: str) -> User | None:
        if not api_key:
            return None
        return self.db.query(User).filter(User.api_key == api_key).first()

    def list_files(self, api_key: str) -> list[JsonFile]:
        """Files reachable with this key, newest first.

        Raises:
            NotFoundError: unknown key, or the owner has no files.
        """
        owner = self.owner_for_key(api_key)
        if owner is None:
            raise NotFoundError("Invalid API key")

        files = (
            self.db.query(JsonFile)
            .filter(JsonFile.user_id == owner.id)
            .order_by(JsonFile.created_at.desc(), JsonFile.id.desc())
            .all()
        )
        if not files:
            raise NotFoundError("No files found for this API key")
        return files

    def resolve(self, api_key: str, file_name: str) -> JsonFile:
        """Return the file and record one view.

        The counter is incremented with a single ``UPDATE ... SET views =
        views + 1`` so concurrent reads never lose an increment. updated_at
        is pinned to its current value; a view is not an edit.

        Raises:
            NotFoundError: unknown key or unknown file under a known key.
        """
        owner = self.owner_for_key(api_key)
        if owner is None:
            raise NotFoundError("File not found")

        file = (
            self.db.query(JsonFile)
            .filter(JsonFile.user_id == owner.id, JsonFile.file_name == file_name)
            .first()
        )
        if file is None:
            raise NotFoundError("File not found")

        self.db.query(JsonFile).filter(JsonFile.id == file.id).update(
            {
                JsonFile.views: JsonFile.views + 1,
                JsonFile.updated_at: JsonFile.updated_at,
            },
            synchronize_session=False,
        )
        self.db.commit()
        self.db.refresh(file)
        logger.debug(f"Served file {file.id} publicly ({file.views} views)")
        return file
