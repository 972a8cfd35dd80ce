"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

SorterName = Literal["merge", "quick", "builtin"]
SearcherName = Literal["linear", "binary"]


class EngineOptions(BaseModel):
    sorter: SorterName | None = None
    searcher: SearcherName | None = None


class BenchmarkOptions(BaseModel):
    sizes: list[int] | None = None
    top_n: int | None = Field(default=None, ge=0)
    score_ceiling: int | None = Field(default=None, gt=0)
    seed: int | None = None
    sorters: list[SorterName] | None = None
    searchers: list[SearcherName] | None = None


class AppConfig(BaseModel):
    engine: EngineOptions = Field(default_factory=EngineOptions)
    benchmark: BenchmarkOptions = Field(default_factory=BenchmarkOptions)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        engine_settings = self.engine.model_dump(exclude_none=True)
        if engine_settings:
            settings["engine"] = engine_settings
        benchmark_settings = self.benchmark.model_dump(exclude_none=True)
        if benchmark_settings:
            settings["benchmark"] = benchmark_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
