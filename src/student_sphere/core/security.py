"""Identity assertion tokens exchanged with the OAuth front end.

The sign-in flow itself lives outside this service. After a successful
sign-in the front end hands us a JWT signed with the shared secret whose
claims carry the provider identity; we trust it without calling the provider.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from student_sphere.core.access import Identity
from student_sphere.core.errors import AuthenticationError
from student_sphere.core.settings import settings


def create_identity_token(identity: Identity, expires_minutes: int | None = None) -> str:
    """Encode an identity as a signed bearer token."""
    ttl = expires_minutes if expires_minutes is not None else settings.access_token_expire_minutes
    payload = {
        "sub": identity.id,
        "email": identity.email,
        "name": identity.name,
        "picture": identity.image,
        "exp": datetime.now(UTC) + timedelta(minutes=ttl),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_identity_token(token: str) -> Identity:
    """Decode a bearer token into an Identity.

    Raises:
        AuthenticationError: If the token is invalid, expired or has no subject.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise AuthenticationError("Could not validate credentials") from err

    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Could not validate credentials")
    return Identity(
        id=str(subject),
        email=payload.get("email"),
        name=payload.get("name"),
        image=payload.get("picture"),
    )
