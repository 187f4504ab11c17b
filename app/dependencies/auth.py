from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app import config

security = HTTPBearer(auto_error=False)


def verify_token(credentials: HTTPAuthorizationCredentials | None = Depends(security)):
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    if not config.ACCESS_TOKEN or credentials.credentials != config.ACCESS_TOKEN:
        raise HTTPException(status_code=401, detail="Invalid token")
    return credentials.credentials
