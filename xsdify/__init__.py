import importlib

mod = "xsdify"
class LazyLoader:
    """
    Lazy loader for the xsdify functions to speed up startup time.
    """
    def __init__(self, mappings):
        self._modules = {}
        self._mappings = mappings

    def _load_module(self, module_name):
        if module_name not in self._modules:
            self._modules[module_name] = importlib.import_module(module_name)
        return self._modules[module_name]

    def __getattr__(self, item):
        if item in self._mappings:
            module_name, attr_name = self._mappings[item]
            module = self._load_module(module_name)
            return getattr(module, attr_name)
        else:
            return self._load_module(f"{mod}.{item}")

# Define the public names and their corresponding module paths
_mappings = {
    "convert_json_schema_to_xsd": (f"{mod}.jsonstoxsd", "convert_json_schema_to_xsd"),
    "convert_json_schema_to_xsd_string": (f"{mod}.jsonstoxsd", "convert_json_schema_to_xsd_string"),
    "JsonSchemaToXSD": (f"{mod}.jsonstoxsd", "JsonSchemaToXSD"),
    "ConversionOptions": (f"{mod}.options", "ConversionOptions"),
}

_lazy_loader = LazyLoader(_mappings)

def __getattr__(name):
    return getattr(_lazy_loader, name)
