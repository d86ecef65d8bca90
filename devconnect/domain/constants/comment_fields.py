"""Constants for Comment model field names"""


class CommentFields:
    """Field name constants for Comment model"""
    ID = "id"
    TEXT = "text"
    USER = "user"
    POST = "post"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    
    # MongoDB specific
    MONGO_ID = "_id"
