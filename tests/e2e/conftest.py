"""E2E test configuration.

Intentionally empty: the e2e runner starts pytest with --noconftest
(support_file = false), so specs under tests/e2e/ must not depend on
fixtures. They only need httpx and E2E_BASE_URL.
"""
