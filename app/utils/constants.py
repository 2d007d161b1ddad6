"""Application-wide constants."""

# API Configuration
API_VERSION = "v1"
API_PREFIX = f"/api/{API_VERSION}"

# Request header carrying the identity token
JWT_HEADER_NAME = "x-jwt"

# Mailgun
MAILGUN_API_BASE = "https://api.mailgun.net/v3"
VERIFICATION_EMAIL_SUBJECT = "Verify Your Email"
VERIFICATION_EMAIL_TEMPLATE = "nubereats"

# Restaurants
MIN_RESTAURANT_NAME_LENGTH = 5
