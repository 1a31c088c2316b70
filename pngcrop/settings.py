import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_MODE = os.getenv("PNGCROP_MODE", "sample")
DEFAULT_NAMING = os.getenv("PNGCROP_NAMING", "identity")
DEFAULT_PREFIX = os.getenv("PNGCROP_PREFIX", "cropped_")
VALID_EXTENSIONS = {
    ext.strip().lower()
    for ext in os.getenv(
        "PNGCROP_VALID_EXTENSIONS", ".png,.gif,.webp,.bmp,.tif,.tiff,.jpg,.jpeg"
    ).split(",")
    if ext.strip()
}
LOG_LEVEL = os.getenv("PNGCROP_LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'
