import configparser
import os
from functools import lru_cache
from pathlib import Path

DEFAULTS = {
    "PATHS": {
        "DATA_DIR": "data/catalog",
    },
    "SEARCH": {
        "LOCALE": "en",
        "SUGGESTION_LIMIT": "20",
    },
    "EASTER_EGG": {
        "SOUND": "/timestop.mp3",
        "VOLUME": "0.35",
    },
}


class ConfigLoader:
    def __init__(self, config_path=None):
        # 自动定位项目根目录 (core/config/*)
        self.project_root = Path(__file__).resolve().parents[2]
        self.config_path = Path(config_path) if config_path else (self.project_root / "conf" / "settings.ini")

        self.config = configparser.ConfigParser()
        self.config.optionxform = str
        self.config.read_dict(DEFAULTS)
        # settings.ini is optional; built-in defaults cover every key
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

    def get(self, section, key, fallback=None):
        """获取配置值并自动展开用户路径 (~)"""
        val = self.config.get(section, key, fallback=fallback)
        if val and "~" in val:
            return os.path.expanduser(val)
        return val

    def get_int(self, section, key, fallback=0):
        try:
            return self.config.getint(section, key, fallback=fallback)
        except ValueError:
            return fallback

    def get_float(self, section, key, fallback=0.0):
        try:
            return self.config.getfloat(section, key, fallback=fallback)
        except ValueError:
            return fallback

    def data_dir(self):
        """Catalog data directory (relative paths resolve against project root)."""
        env = os.environ.get("RITUALMAP_DATA_DIR", "").strip()
        raw = env or self.get("PATHS", "DATA_DIR") or DEFAULTS["PATHS"]["DATA_DIR"]
        path = Path(os.path.expanduser(raw))
        if not path.is_absolute():
            path = self.project_root / path
        return path

    def locale(self):
        env = os.environ.get("RITUALMAP_LOCALE", "").strip()
        return env or self.get("SEARCH", "LOCALE") or "en"

    def suggestion_limit(self):
        return max(1, self.get_int("SEARCH", "SUGGESTION_LIMIT", 20))

    def easter_egg_sound(self):
        return self.get("EASTER_EGG", "SOUND") or DEFAULTS["EASTER_EGG"]["SOUND"]

    def easter_egg_volume(self):
        return self.get_float("EASTER_EGG", "VOLUME", 0.35)


@lru_cache(maxsize=1)
def get_config():
    """共享实例 (首次调用时读取 conf/settings.ini)"""
    return ConfigLoader()


# === 测试代码 ===
if __name__ == "__main__":
    cfg = get_config()
    print(f"Project Root: {cfg.project_root}")
    print(f"Data Dir: {cfg.data_dir()}")
    print(f"Locale: {cfg.locale()}")
