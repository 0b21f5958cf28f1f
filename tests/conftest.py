"""Root conftest — sets env vars BEFORE any clawwizard module is imported.

load_settings() reads CLAWWIZARD_DIR and CLAWWIZARD_WORKSPACE; pin both to
throwaway locations so a developer's real ~/.clawwizard or ~/clawd is never
touched by the suite.
"""

import os
import tempfile

# Force-set (not setdefault) to prevent real env vars from leaking into tests
os.environ["CLAWWIZARD_DIR"] = tempfile.mkdtemp(prefix="clawwizard-test-")
os.environ.pop("CLAWWIZARD_WORKSPACE", None)
