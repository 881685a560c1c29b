# centralized configuration loader
# runs load_dotenv() to read .env
# timeouts, CORS and the visitor-facing apology texts can change without a code change

import os
from dotenv import load_dotenv

load_dotenv()

# Server
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

# Upstream HTTP
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "60"))
HTTP_CONNECT_TIMEOUT_SECONDS = float(os.getenv("HTTP_CONNECT_TIMEOUT_SECONDS", "10"))

# Connection test probe
CONNECTION_TEST_TEMPERATURE = float(os.getenv("CONNECTION_TEST_TEMPERATURE", "0.7"))
CONNECTION_TEST_MAX_TOKENS = int(os.getenv("CONNECTION_TEST_MAX_TOKENS", "50"))

# Texts shown to chat visitors (Indonesian by default)
CHAT_APOLOGY_CONFIG = os.getenv(
    "CHAT_APOLOGY_CONFIG",
    "Maaf, terjadi kesalahan dalam konfigurasi. Mohon periksa pengaturan AI.",
)
CHAT_APOLOGY_PROVIDER = os.getenv("CHAT_APOLOGY_PROVIDER", "Maaf, provider AI tidak didukung.")
CHAT_APOLOGY_DEFAULT = os.getenv(
    "CHAT_APOLOGY_DEFAULT",
    "Maaf, saya mengalami gangguan teknis. Mohon tunggu sebentar atau hubungi customer service kami.",
)
CHAT_FALLBACK_REPLY = os.getenv(
    "CHAT_FALLBACK_REPLY",
    "Maaf, saya tidak dapat memproses permintaan Anda saat ini.",
)
