import logging
import os
from datetime import datetime
from typing import Optional

from core.config import settings

def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None):
    """Configure logging for the application."""
    level = (level or settings.LOG_LEVEL).upper()
    log_dir = log_dir if log_dir is not None else settings.LOG_DIR
    
    handlers = [logging.StreamHandler()]
    
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        today = datetime.now().strftime("%Y-%m-%d")
        log_file = os.path.join(log_dir, f"fittracker_{today}.log")
        handlers.append(logging.FileHandler(log_file))
    
    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )
    
    # Classifier transitions are logged at DEBUG; keep them quiet unless asked for
    if level != "DEBUG":
        logging.getLogger('models.exercise.classifiers').setLevel(logging.INFO)
    
    return logging.getLogger(__name__)
