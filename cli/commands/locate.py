from __future__ import annotations

from toolchain.locate import ToolchainConfig, ToolLocation


def _describe(loc: ToolLocation) -> str:
    if not loc.found:
        return "not found"
    return f"{loc.path} (via {loc.source})"


def run_locate(config: ToolchainConfig) -> int:
    """Print where each tool was found. Exit 1 when jack.jar is missing."""
    print(f"  jack : {_describe(config.jack)}")
    print(f"  jill : {_describe(config.jill)}")

    if not config.jack.found:
        print("\n⚠️ jack.jar not found. Set JACK_JAR or ANDROID_BUILD_TOP.")
        return 1
    return 0
