from lexeme_practice.core.models.modelspec import ModelSpec


class ModelRegistry:
    _models: dict[str, ModelSpec] = {}

    @classmethod
    def register(cls, model: ModelSpec):
        cls._models[model.id] = model

    @classmethod
    def get(cls, model_id: str) -> ModelSpec:
        if model_id not in cls._models:
            raise KeyError(f"Unknown model: {model_id}")
        return cls._models[model_id]

    @classmethod
    def list(cls, family=None) -> list[ModelSpec]:
        return [
            m for m in cls._models.values()
            if family is None or m.family == family
        ]

    @classmethod
    def clear(cls):
        cls._models.clear()
