# Error codes are grouped by category ranges:
#   1000-1999 Validation, 2000-2999 Not Found, 3000-3999 Authorization,
#   4000-4999 Authentication, 5000-5999 External Service, 6000-6999 Rate Limit,
#   7000-7999 Configuration, 8000-8999 Internal

# Internal
MEDIA_DECODE_UNSUPPORTED = 8001
