# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Local application imports
from ..constants import UserFields


@dataclass
class User:
    """
    Pure domain model for the User record.
    
    The id is assigned by the document store on insert and is None until then.
    Every other field is optional so that records stored before a field
    existed can still be read back.
    """
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age_group: Optional[str] = None
    gender: Optional[str] = None
    has_laptop: Optional[bool] = None
    bio: Optional[str] = None
    heard_from: Optional[List[str]] = field(default=None)
    
    @classmethod
    def from_fields(cls, fields: Dict[str, Any], user_id: Optional[str] = None) -> "User":
        """Build a User from a camelCase field mapping, ignoring unknown keys"""
        heard_from = fields.get(UserFields.HEARD_FROM)
        return cls(
            id=user_id,
            first_name=fields.get(UserFields.FIRST_NAME),
            last_name=fields.get(UserFields.LAST_NAME),
            age_group=fields.get(UserFields.AGE_GROUP),
            gender=fields.get(UserFields.GENDER),
            has_laptop=fields.get(UserFields.HAS_LAPTOP),
            bio=fields.get(UserFields.BIO),
            heard_from=list(heard_from) if isinstance(heard_from, list) else heard_from,
        )
    
    def to_fields(self) -> Dict[str, Any]:
        """camelCase field mapping of the values that are set (id excluded)"""
        values = {
            UserFields.FIRST_NAME: self.first_name,
            UserFields.LAST_NAME: self.last_name,
            UserFields.AGE_GROUP: self.age_group,
            UserFields.GENDER: self.gender,
            UserFields.HAS_LAPTOP: self.has_laptop,
            UserFields.BIO: self.bio,
            UserFields.HEARD_FROM: self.heard_from,
        }
        return {key: value for key, value in values.items() if value is not None}
