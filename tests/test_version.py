from __future__ import annotations

import steam_deploy
from steam_deploy.__version__ import get_version


def test_version_info_matches_version() -> None:
    assert get_version() == steam_deploy.__version__
    assert ".".join(str(part) for part in steam_deploy.__version_info__) == steam_deploy.__version__
    assert steam_deploy.__author__ == "steam-deploy contributors"
