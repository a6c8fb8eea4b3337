"""wpvalet — WordPress request routing for local development.

Decides, per request, whether a URI is a shared multisite core file, an
ordinary file on disk, an upload to fetch from production, or a job for
the WordPress front controller.

Basic usage::

    from wpvalet import RoutingPolicy, WordPressSiteDriver

    policy = RoutingPolicy(WordPressSiteDriver())
    ctx = policy.serves("/home/me/Sites/blog", "blog", uri, host="blog.test")
    outcome = policy.is_static_file(ctx, uri)

Serving parked sites::

    from wpvalet import ValetApp, ValetConfig

    app = ValetApp(ValetConfig(paths=("~/Sites",)))
"""

__version__ = "0.1.0"
__all__ = [
    "AssetKind",
    "ConfigurationError",
    "DriverConfig",
    "HTTPError",
    "Local",
    "Remote",
    "RequestContext",
    "Response",
    "RoutingOutcome",
    "RoutingPolicy",
    "SiteDriver",
    "ValetApp",
    "ValetConfig",
    "ValetError",
    "WordPressSiteDriver",
    "classify",
    "detect_multisite",
    "resolve_remote_origin",
]

_LAZY = {
    "AssetKind": "wpvalet.classify",
    "classify": "wpvalet.classify",
    "DriverConfig": "wpvalet.config",
    "ValetConfig": "wpvalet.config",
    "RequestContext": "wpvalet.context",
    "SiteDriver": "wpvalet.drivers.base",
    "WordPressSiteDriver": "wpvalet.drivers.wordpress",
    "ConfigurationError": "wpvalet.errors",
    "HTTPError": "wpvalet.errors",
    "ValetError": "wpvalet.errors",
    "Response": "wpvalet.http.response",
    "detect_multisite": "wpvalet.multisite",
    "Local": "wpvalet.outcome",
    "Remote": "wpvalet.outcome",
    "RoutingOutcome": "wpvalet.outcome",
    "resolve_remote_origin": "wpvalet.remote",
    "RoutingPolicy": "wpvalet.router",
    "ValetApp": "wpvalet.server.app",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wpvalet`` fast; the server stack loads only when
    ``ValetApp`` is asked for.
    """
    module_name = _LAZY.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
