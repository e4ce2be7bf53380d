"""
Tool catalog — package-name variants per platform for every installable tool.

Pure data, no logic. ``install`` maps a platform name to candidate
package names, most likely to exist first; ``_default`` covers every
platform without its own entry. Winget ids lead the Windows lists
because winget is first in that chain.
"""

from __future__ import annotations

TOOL_CATALOG: dict[str, dict] = {

    # ── Data wrangling ──────────────────────────────────────────

    "jq": {
        "homepage": "https://jqlang.org/download/",
        "install": {
            "_default": ["jq"],
            "windows": ["jqlang.jq", "jq"],
        },
    },
    "yq": {
        "homepage": "https://github.com/mikefarah/yq#install",
        "install": {
            "_default": ["yq"],
            "windows": ["MikeFarah.yq", "yq"],
        },
    },
    "curl": {
        "homepage": "https://curl.se/download.html",
        "install": {
            "_default": ["curl"],
            "windows": ["cURL.cURL", "curl"],
        },
    },

    # ── Search and navigation ───────────────────────────────────

    "ripgrep": {
        "homepage": "https://github.com/BurntSushi/ripgrep#installation",
        "install": {
            "_default": ["ripgrep"],
            "windows": ["BurntSushi.ripgrep.MSVC", "ripgrep"],
        },
    },
    "fd": {
        "homepage": "https://github.com/sharkdp/fd#installation",
        "install": {
            "_default": ["fd", "fd-find"],
            "debian": ["fd-find", "fd"],
            "fedora": ["fd-find", "fd"],
            "windows": ["sharkdp.fd", "fd"],
        },
    },
    "fzf": {
        "homepage": "https://github.com/junegunn/fzf#installation",
        "install": {
            "_default": ["fzf"],
            "windows": ["junegunn.fzf", "fzf"],
        },
    },

    # ── File viewing ────────────────────────────────────────────

    "bat": {
        "homepage": "https://github.com/sharkdp/bat#installation",
        "install": {
            "_default": ["bat"],
            "windows": ["sharkdp.bat", "bat"],
        },
    },
    "eza": {
        "homepage": "https://github.com/eza-community/eza/blob/main/INSTALL.md",
        "install": {
            "_default": ["eza"],
            "windows": ["eza-community.eza", "eza"],
        },
    },
    "dust": {
        "homepage": "https://github.com/bootandy/dust#install",
        "install": {
            "_default": ["dust", "du-dust"],
            "debian": ["du-dust", "dust"],
            "windows": ["bootandy.dust", "dust"],
        },
    },

    # ── Editors and VCS ─────────────────────────────────────────

    "neovim": {
        "homepage": "https://github.com/neovim/neovim/blob/master/INSTALL.md",
        "install": {
            "_default": ["neovim"],
            "windows": ["Neovim.Neovim", "neovim"],
        },
    },
    "git": {
        "homepage": "https://git-scm.com/downloads",
        "install": {
            "_default": ["git"],
            "windows": ["Git.Git", "git"],
        },
    },
    "gh": {
        "homepage": "https://github.com/cli/cli#installation",
        "install": {
            "_default": ["gh"],
            "windows": ["GitHub.cli", "gh"],
        },
    },
}
