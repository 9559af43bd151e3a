BEARER_SCHEME = "bearer"
AUTHORIZATION_HEADER = "Authorization"
CLAIM_USER_ID = "userId"
