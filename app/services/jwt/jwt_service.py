"""Signing and verification of identity tokens"""

from jose import JWTError, jwt


class InvalidTokenError(Exception):
    """Raised when a token is malformed, wrongly signed or has no user id"""


class JwtService:
    """Encodes a user id into an HS256 token and back.

    Tokens carry only the ``id`` claim; no expiry is set or enforced.
    """

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self._secret = secret
        self._algorithm = algorithm

    def sign(self, user_id: int) -> str:
        return jwt.encode({"id": user_id}, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        user_id = payload.get("id") if isinstance(payload, dict) else None
        # bool is a subclass of int
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidTokenError("token payload has no user id")
        return user_id
