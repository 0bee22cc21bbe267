"""
Root conftest.py - Global configuration for all test layers.

Test Layers:
    - component/  : Service tests against a mocked transport
    - unit/       : Entities, projections, config, transport (no network)
"""
import os
import sys

# Keep a developer's .env out of the test run
os.environ.setdefault("SUBSCRIBEPRO_ENV_FILE", os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env.test"))

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)
