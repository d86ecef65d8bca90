"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    TITLE = "title"
    BODY = "body"
    AUTHOR = "author"
    LIKES = "likes"
    COMMENTS = "comments"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    
    # MongoDB specific
    MONGO_ID = "_id"
