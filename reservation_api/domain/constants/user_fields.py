"""Constants for User document field names"""


class UserFields:
    """Field name constants for the users collection"""
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    ENCRYPTED_PASSWORD = "encryptedPassword"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
