import math
from dataclasses import asdict, is_dataclass
from enum import Enum

import numpy as np
from fastapi.responses import JSONResponse

def sanitize_for_json(data):
    """Sanitize data to ensure all values are JSON compliant."""
    if is_dataclass(data) and not isinstance(data, type):
        return sanitize_for_json(asdict(data))
    elif isinstance(data, Enum):
        return data.value
    elif isinstance(data, dict):
        return {sanitize_for_json(k): sanitize_for_json(v) for k, v in data.items()}
    elif isinstance(data, (list, tuple)):
        return [sanitize_for_json(item) for item in data]
    elif isinstance(data, np.ndarray):
        return sanitize_for_json(data.tolist())
    elif isinstance(data, (bool, np.bool_)):
        return bool(data)
    elif isinstance(data, (float, np.floating)):
        # Replace invalid values with None
        if math.isnan(data) or math.isinf(data):
            return None
        return float(data)  # Ensure native Python float
    elif isinstance(data, np.integer):
        return int(data)
    else:
        return data

class CustomJSONResponse(JSONResponse):
    """Custom JSONResponse that handles dataclasses, enums, NumPy types and NaN/Inf values."""
    def render(self, content) -> bytes:
        sanitized_content = sanitize_for_json(content)
        return super().render(sanitized_content)
