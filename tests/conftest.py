"""
Pytest configuration for kubeparse tests
"""

import sys
from pathlib import Path

# Ensure the parent directory is in the Python path for imports
parent_dir = Path(__file__).resolve().parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))
