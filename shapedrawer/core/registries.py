shape_registry: dict[str, type] = {}


def register_shape(name: str):
    def _decorator(cls: type) -> type:
        if not name or name in shape_registry:
            raise ValueError(f"Invalid or duplicate shape name '{name}'")
        shape_registry[name] = cls
        return cls
    return _decorator
