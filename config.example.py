# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_DATA_DIR": "Local directory for tasklist.log (default: .local/tasklist).",
    # Media
    "TASKLIST_MEDIA_DIR": "Media directory checked for read access and used for relative picker paths (default: ~/Pictures).",
    "TASKLIST_IMAGE_MIME_FILTER": "MIME filter for the image picker (default: image/*).",
    # Permission
    "TASKLIST_PLATFORM_API_LEVEL": "API level; >= 33 requests READ_MEDIA_IMAGES, else READ_EXTERNAL_STORAGE (default: 33).",
    "TASKLIST_REQUEST_PERMISSION": "Request the media permission on launch (true/false, default: true).",
}
