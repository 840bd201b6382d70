import pytest
import logging
from pathlib import Path
from dotenv import load_dotenv

# --- Eagerly load test environment on import ---
# Executed while pytest collects this conftest, so the environment is in place
# before any cursorscan configuration is read.
project_root = Path(__file__).parent.parent
env_test_path = project_root / '.env.test'

if not env_test_path.exists():
    raise FileNotFoundError(f"CRITICAL: Test environment file not found at '{env_test_path}'. Tests cannot proceed.")

load_dotenv(env_test_path, override=True)
logging.info(f"Successfully loaded test environment from {env_test_path}")

def pytest_configure(config):
    logger = logging.getLogger('cursorscan')
    logger.setLevel(logging.DEBUG)

    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    ch.setFormatter(formatter)

    logger.addHandler(ch)

@pytest.fixture(scope='session', autouse=True)
def configure_logging():
    # Logging is configured in pytest_configure; kept so every test depends on it.
    pass
