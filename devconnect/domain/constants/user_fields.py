"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    HASHED_PASSWORD = "password"
    BIO = "bio"
    SKILLS = "skills"
    AVATAR = "avatar"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
