# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from quoteplan import configuration
from quoteplan.errors import ConfigurationError


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ConfigurationError("Configuration could not be loaded")
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()

        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = defaults
            return

        raw: Any = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"{configuration.APP_CONFIG_PATH} does not contain a mapping"
            )

        # Fill in settings added after the file was written
        for key, value in defaults.items():
            if key not in raw:
                raw[key] = value
        if raw["layout"] is None:
            raw["layout"] = defaults["layout"]

        self._config = raw  # type: ignore[assignment]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        work_on_saturday: Optional[bool] = None,
        work_on_sunday: Optional[bool] = None,
        cells_per_day: Optional[int] = None,
        log_level: Optional[str] = None,
        layout: Optional[dict[str, float]] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if work_on_saturday is not None:
            self.config["work_on_saturday"] = work_on_saturday
        if work_on_sunday is not None:
            self.config["work_on_sunday"] = work_on_sunday
        if cells_per_day is not None:
            self.config["cells_per_day"] = cells_per_day
        if log_level is not None:
            self.config["log_level"] = log_level
        if layout is not None:
            merged = dict(self.config["layout"])
            merged.update(layout)
            candidate = deepcopy(self.config)
            candidate["layout"] = merged  # type: ignore[typeddict-item]
            # Reject bad constants before they reach the file
            configuration.layout_configuration_from(candidate)
            self.config["layout"] = merged  # type: ignore[typeddict-item]


CONFIGURATION_REPO = ConfigurationRepository()
