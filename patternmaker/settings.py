import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEFAULT_BRAND = os.getenv("DEFAULT_BRAND", "DMC")
DEFAULT_GRID_WIDTH = int(os.getenv("DEFAULT_GRID_WIDTH", "60"))
DEFAULT_TOLERANCE = float(os.getenv("DEFAULT_TOLERANCE", "40"))
CHUNK_ROWS = int(os.getenv("CHUNK_ROWS", "5"))  # grid rows per progress step
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
