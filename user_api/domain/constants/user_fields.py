"""Constants for User model field names and allowed values"""

# Standard library imports
from typing import Literal, get_args


class UserFields:
    """Field name constants for User model (wire and document names)"""
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    AGE_GROUP = "ageGroup"
    GENDER = "gender"
    HAS_LAPTOP = "hasLaptop"
    BIO = "bio"
    HEARD_FROM = "heardFrom"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    
    # Fields a client may write, in validation order
    WRITABLE = (
        FIRST_NAME,
        LAST_NAME,
        AGE_GROUP,
        GENDER,
        HAS_LAPTOP,
        BIO,
        HEARD_FROM,
    )


AgeGroup = Literal["<18", "18-24", "25-34", "35-44", "45+"]
Gender = Literal["Male", "Female", "Other"]

AGE_GROUPS = get_args(AgeGroup)
GENDERS = get_args(Gender)
BIO_MIN_LENGTH = 10
OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"
