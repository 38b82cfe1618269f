"""ModuleSuiteLoader — imports registries named by ``package.module:attribute``."""

import importlib

from by_example.core.errors import ByExampleError
from by_example.registry.domain.registry import Registry
from by_example.suite.domain.observer import SuiteObserver
from by_example.suite.infrastructure.errors import SuiteLoadError

DEFAULT_ATTRIBUTE = "registry"


def parse_target(target: str) -> tuple[str, str]:
    """Split a target into (module path, attribute name).

    >>> parse_target("by_example.tour")
    ('by_example.tour', 'registry')
    """
    module_name, sep, attribute = target.partition(":")
    if not module_name or (sep and not attribute):
        raise SuiteLoadError(
            target=target, reason="expected 'module' or 'module:attribute'"
        )
    return module_name, attribute or DEFAULT_ATTRIBUTE


class ModuleSuiteLoader:
    """Imports each target and merges the registries it names, in target order.

    Importing a suite module runs its registration calls, so registration
    errors (duplicate identifiers, incomplete examples) surface from ``load``
    unchanged.
    """

    def __init__(self, observer: SuiteObserver) -> None:
        self._observer = observer

    def load(self, targets: list[str]) -> Registry:
        """Return one Registry holding every example of every target.

        Raises:
            SuiteLoadError: if a module cannot be imported or raises while
                importing, lacks the attribute, or the attribute is not a
                Registry.
            DuplicateIdentifierError: if two suites share an identifier.
        """
        combined = Registry()
        seen: set[str] = set()
        for target in targets:
            module_name, attribute = parse_target(target)
            key = f"{module_name}:{attribute}"
            if key in seen:
                self._observer.suite_duplicate_target_skipped(target=target)
                continue
            seen.add(key)

            registry = _resolve(
                target=target, module_name=module_name, attribute=attribute
            )
            combined.extend(registry)
            self._observer.suite_loaded(target=target, total_examples=len(registry))
        return combined


def _resolve(target: str, module_name: str, attribute: str) -> Registry:
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SuiteLoadError(target=target, reason=f"cannot import ({exc})") from exc
    except SyntaxError as exc:
        raise SuiteLoadError(target=target, reason=f"syntax error ({exc})") from exc
    except ByExampleError:
        raise
    except Exception as exc:
        raise SuiteLoadError(
            target=target,
            reason=f"module raised during import ({type(exc).__name__}: {exc})",
        ) from exc

    try:
        registry = getattr(module, attribute)
    except AttributeError as exc:
        raise SuiteLoadError(
            target=target, reason=f"module has no attribute '{attribute}'"
        ) from exc

    if not isinstance(registry, Registry):
        raise SuiteLoadError(
            target=target,
            reason=f"'{attribute}' is a {type(registry).__name__}, not a Registry",
        )
    return registry
