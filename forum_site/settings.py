"""
Django settings for forum_site project.
(DJANGO_ENV=prod → .env.prod / 기본값: .env.dev, 파일이 없으면 환경변수)
"""

import os
from pathlib import Path

import dj_database_url
from decouple import AutoConfig, Config, RepositoryEnv

# -----------------------------------------------------
# 📁 기본 경로 설정
# -----------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent

# -----------------------------------------------------
# ⚙️ 환경 파일(.env) 자동 선택
# -----------------------------------------------------
env_mode = os.environ.get("DJANGO_ENV", "dev")
env_file = BASE_DIR / (".env.prod" if env_mode == "prod" else ".env.dev")

if env_file.exists():
    config = Config(RepositoryEnv(env_file))
else:
    config = AutoConfig(search_path=BASE_DIR)

# -----------------------------------------------------
# 🔑 보안 키 및 기본 설정
# -----------------------------------------------------
SECRET_KEY = config("SECRET_KEY", default="unsafe-default-key")
DEBUG = config("DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = [h.strip() for h in config("ALLOWED_HOSTS", default="localhost,127.0.0.1").split(",")]

# -----------------------------------------------------
# 📦 Installed Apps
# -----------------------------------------------------
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # ✅ 프로젝트 앱들
    "forums",
    "forum_access.apps.ForumAccessConfig",
]

# -----------------------------------------------------
# 🧱 Middleware
# -----------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# -----------------------------------------------------
# 📚 Templates
# -----------------------------------------------------
ROOT_URLCONF = "forum_site.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "forum_site.wsgi.application"

# -----------------------------------------------------
# 🗄️ Database
# -----------------------------------------------------
DATABASE_URL = config("DATABASE_URL", default="")
if DATABASE_URL:
    DATABASES = {
        "default": dj_database_url.parse(DATABASE_URL, conn_max_age=600, ssl_require=not DEBUG)
    }
else:
    # fallback (로컬 DB)
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------------------------------
# 🔐 Password Validation
# -----------------------------------------------------
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# -----------------------------------------------------
# 🌍 Locale / Timezone
# -----------------------------------------------------
LANGUAGE_CODE = config("LANGUAGE_CODE", default="en-us")
TIME_ZONE = config("TIME_ZONE", default="UTC")
USE_I18N = True
USE_TZ = True

# -----------------------------------------------------
# 🖼️ Static Files
# -----------------------------------------------------
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

if not DEBUG:
    STORAGES = {
        "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
        "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
    }

# -----------------------------------------------------
# 🔒 Session & CSRF Settings
# -----------------------------------------------------
SESSION_EXPIRE_AT_BROWSER_CLOSE = True
SESSION_COOKIE_AGE = 3600

SESSION_COOKIE_SECURE = config("SESSION_COOKIE_SECURE", default=not DEBUG, cast=bool)
CSRF_COOKIE_SECURE = config("CSRF_COOKIE_SECURE", default=not DEBUG, cast=bool)
CSRF_COOKIE_HTTPONLY = True
SECURE_SSL_REDIRECT = config("SECURE_SSL_REDIRECT", default=not DEBUG, cast=bool)

# -----------------------------------------------------
# 🚪 Login / Logout Redirects
# -----------------------------------------------------
LOGIN_URL = "/admin/login/"
LOGIN_REDIRECT_URL = "/"
LOGOUT_REDIRECT_URL = "/"

# -----------------------------------------------------
# 🧭 Forum Access
# -----------------------------------------------------
FORUM_ACCESS_FORUM_MODEL = "forums.Forum"
FORUM_ACCESS_PUBLISHED_FILTER = {"status": "publish"}
FORUM_ACCESS_FORUM_LIST_LIMIT = config("FORUM_ACCESS_FORUM_LIST_LIMIT", default=20, cast=int)
FORUM_ACCESS_DENIED_MESSAGE = config("FORUM_ACCESS_DENIED_MESSAGE", default="")

# -----------------------------------------------------
# 🪵 Logging
# -----------------------------------------------------
LOG_FILE = config("LOG_FILE", default="")
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "level": LOG_LEVEL,
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "forum_access": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django.server": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}

if LOG_FILE:
    LOGGING["handlers"]["file"] = {
        "level": LOG_LEVEL,
        "class": "logging.FileHandler",
        "filename": LOG_FILE,
        "formatter": "simple",
    }
    LOGGING["loggers"]["forum_access"]["handlers"].append("file")
