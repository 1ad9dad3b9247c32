import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
DEBUG = os.getenv('DEBUG', '0') == '1'
ALLOWED_HOSTS = ['*']

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.sessions',
    'rest_framework',
    'corsheaders',
    'medassist',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'
WSGI_APPLICATION = 'config.wsgi.application'

# 不落库：诊断结果和购物会话都只在进程内存里
DATABASES = {}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Sessions: 只存 shopping_session_id 和 AI 设置覆盖，用签名 cookie，不需要数据库。
# 签名 cookie 只防篡改不加密：用户在设置页填的 API key 会以明文随每个请求往返，
# 部署时必须走 HTTPS（SESSION_COOKIE_SECURE=1）。
SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SECURE = os.getenv('SESSION_COOKIE_SECURE', '0') == '1'

# CORS
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# REST Framework
REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    # 认证由外部身份服务负责，这里不做
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'EXCEPTION_HANDLER': 'medassist.exception_handler.unified_exception_handler',
}

# AI providers
AI_PROVIDER = os.getenv('AI_PROVIDER', 'openai')
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY', '')
OPENAI_MODEL = os.getenv('OPENAI_MODEL', '')
GEMINI_API_KEY = os.getenv('GEMINI_API_KEY', '')
GEMINI_MODEL = os.getenv('GEMINI_MODEL', '')
# 单次调用超时（秒），超时按调用失败处理
AI_REQUEST_TIMEOUT = float(os.getenv('AI_REQUEST_TIMEOUT', '30'))

# Payment（模拟网关）
PAYMENT_SIMULATED_DELAY = float(os.getenv('PAYMENT_SIMULATED_DELAY', '3'))
PAYMENT_SIMULATE_FAILURE = os.getenv('PAYMENT_SIMULATE_FAILURE', '0') == '1'
PAYMENT_PAYER_EMAIL = os.getenv('PAYMENT_PAYER_EMAIL', 'user@example.com')

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'medassist': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
