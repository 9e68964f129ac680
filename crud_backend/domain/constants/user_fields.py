"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model (stored and wire names)"""
    ID = "id"
    NAME = "name"
    SURNAME = "surname"
    EMAIL = "email"
    JOB_TITLE = "jobTitle"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields a client may set on create/update
    EDITABLE = (NAME, SURNAME, EMAIL, JOB_TITLE)
