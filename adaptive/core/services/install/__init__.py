"""
Install service — package re-exports.

    from adaptive.core.services.install import install_on_debian, install_jq

Each symbol lives in its single-responsibility module:
request (argument partition) → chains (priority order) →
orchestrator (chain walk) → tools (per-tool wrappers).
"""

from adaptive.core.services.install.chains import DEFAULT_CHAINS, PriorityChain  # noqa: F401
from adaptive.core.services.install.orchestrator import (  # noqa: F401
    PackageInstaller,
    install_on,
    install_on_alpine,
    install_on_arch,
    install_on_debian,
    install_on_fedora,
    install_on_macos,
    install_on_windows,
)
from adaptive.core.services.install.request import (  # noqa: F401
    parse_install_args,
    split_install_args,
)
from adaptive.core.services.install.tools import (  # noqa: F401
    install_bat,
    install_curl,
    install_dust,
    install_eza,
    install_fd,
    install_fzf,
    install_gh,
    install_git,
    install_jq,
    install_neovim,
    install_ripgrep,
    install_tool,
    install_yq,
    tool_catalog,
    variants_for,
)
