"""Well-known capability names and built-in defaults.

Capability names are the container keys the remoting runtime looks up. The
container does not know what the capabilities do; it only stores whatever is
bound under these names.

Default implementation identifiers use the ``module:Class`` form understood by
:func:`ajaxwire.container.plugins.load_plugin`. They are stored as settings and
resolved by the runtime layer, not by this package.
"""

# =============================================================================
# CAPABILITY NAMES
# =============================================================================

ACCESS_CONTROL = "ajaxwire.AccessControl"
CONVERTER_MANAGER = "ajaxwire.ConverterManager"
CREATOR_MANAGER = "ajaxwire.CreatorManager"
URL_PROCESSOR = "ajaxwire.servlet.UrlProcessor"
WEB_CONTEXT_BUILDER = "ajaxwire.WebContextBuilder"
SERVER_CONTEXT_BUILDER = "ajaxwire.ServerContextBuilder"
AJAX_FILTER_MANAGER = "ajaxwire.AjaxFilterManager"
REMOTER = "ajaxwire.Remoter"
DEBUG_PAGE_GENERATOR = "ajaxwire.DebugPageGenerator"
HTML_JS_MARSHALLER = "ajaxwire.wire.HtmlJsMarshaller"
PLAIN_JS_MARSHALLER = "ajaxwire.wire.PlainJsMarshaller"
SCRIPT_SESSION_MANAGER = "ajaxwire.ScriptSessionManager"
SERVER_LOAD_MONITOR = "ajaxwire.ServerLoadMonitor"

# Host context attribute keys used alongside WEB_CONTEXT_BUILDER
CONTAINER = "ajaxwire.Container"
HOST_CONFIG = "ajaxwire.hosting.HostConfig"
HOSTING_SERVLET = "ajaxwire.hosting.Servlet"

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_IMPLEMENTATIONS: dict[str, str] = {
    ACCESS_CONTROL: "ajaxwire.impl.access:DefaultAccessControl",
    CONVERTER_MANAGER: "ajaxwire.wire.converters:DefaultConverterManager",
    CREATOR_MANAGER: "ajaxwire.impl.creators:DefaultCreatorManager",
    URL_PROCESSOR: "ajaxwire.servlet.url:UrlProcessor",
    WEB_CONTEXT_BUILDER: "ajaxwire.impl.web:DefaultWebContextBuilder",
    SERVER_CONTEXT_BUILDER: "ajaxwire.impl.server:DefaultServerContextBuilder",
    AJAX_FILTER_MANAGER: "ajaxwire.impl.filters:DefaultAjaxFilterManager",
    REMOTER: "ajaxwire.impl.remoter:DefaultRemoter",
    DEBUG_PAGE_GENERATOR: "ajaxwire.impl.debug:DefaultDebugPageGenerator",
    HTML_JS_MARSHALLER: "ajaxwire.wire.marshallers:HtmlJsMarshaller",
    PLAIN_JS_MARSHALLER: "ajaxwire.wire.marshallers:PlainJsMarshaller",
    SCRIPT_SESSION_MANAGER: "ajaxwire.impl.sessions:DefaultScriptSessionManager",
    SERVER_LOAD_MONITOR: "ajaxwire.impl.load:DefaultServerLoadMonitor",
}

DEFAULT_SETTINGS: dict[str, str] = {
    "debug": "false",
    "allowImpossibleTests": "false",
    "scriptCompressed": "false",
}

# Capabilities reported by the debug dump, in report order
DEBUG_CAPABILITIES: tuple[str, ...] = (
    ACCESS_CONTROL,
    AJAX_FILTER_MANAGER,
    CONVERTER_MANAGER,
    CREATOR_MANAGER,
)

WELL_KNOWN_CAPABILITIES: tuple[str, ...] = tuple(DEFAULT_IMPLEMENTATIONS)
