"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    ├── test_jwt_backends.py   Backend equivalence and codecs
    ├── test_jwt_verifier.py   Verification rules
    ├── test_encoding.py       Order token encoding
    ├── test_models.py         Data models
    └── test_config.py         Configuration

Usage:
    pytest tests/unit -v
    pytest tests/unit -m jwt -v
"""


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "jwt: webhook JWT verification tests"
    )
