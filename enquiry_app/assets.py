# enquiry_app/assets.py
# Front-end script registry.
# Scripts are registered with a handle and the handles they depend on;
# ordered() returns them dependencies-first so a script always loads after
# the scripts it overrides.

from dataclasses import dataclass, field


@dataclass
class Script:
    handle: str
    filename: str
    deps: list[str] = field(default_factory=list)
    version: str = ''


class ScriptRegistry:
    def __init__(self):
        self._scripts: dict[str, Script] = {}

    def register(self, handle: str, filename: str, deps=None, version: str = '') -> None:
        self._scripts[handle] = Script(handle, filename, list(deps or []), version)

    def ordered(self, handles=None) -> list[Script]:
        """Resolve `handles` (default: all) plus their dependencies, deps first."""
        result: list[Script] = []
        visiting: set[str] = set()
        done: set[str] = set()

        def visit(handle: str):
            if handle in done:
                return
            if handle in visiting:
                raise ValueError(f"Circular script dependency at {handle!r}")
            if handle not in self._scripts:
                raise KeyError(f"Unknown script handle {handle!r}")
            visiting.add(handle)
            for dep in self._scripts[handle].deps:
                visit(dep)
            visiting.discard(handle)
            done.add(handle)
            result.append(self._scripts[handle])

        for handle in handles or list(self._scripts):
            visit(handle)
        return result


ASSET_VERSION = '1.4.1'

scripts = ScriptRegistry()
scripts.register('add-to-cart', 'js/add-to-cart.js', version=ASSET_VERSION)
# enquiry.js must run after add-to-cart.js so its handler wins
scripts.register('enquiry', 'js/enquiry.js', deps=['add-to-cart'], version=ASSET_VERSION)
