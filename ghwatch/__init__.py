"""ghwatch: live terminal dashboard for GitHub Actions workflow runs.

Polls each configured repository's Actions runs endpoint, keeps the most
recent run per (repository, branch) and redraws a bordered table every
7.5 seconds.
"""

__version__ = "0.1.0"
__description__ = (
    "Live terminal dashboard of the latest GitHub Actions run per repository and branch"
)

from ghwatch.monitor.projection import WatchProjection
from ghwatch.monitor.renderer import WatchRenderer

__all__ = ["WatchProjection", "WatchRenderer", "__version__"]
