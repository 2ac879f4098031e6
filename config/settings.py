# config/settings.py
"""
Carregador de configurações da bolsa.
"""
import os
import re
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, List
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = str(Path(__file__).parent / "config.yaml")

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigurationError(Exception):
    """Exceção para erros de configuração."""
    pass


class ConfigValidator:
    """Valida configurações do sistema."""

    @staticmethod
    def validate_config(config: Dict[str, Any]) -> List[str]:
        """
        Valida a configuração e retorna lista de erros.

        Returns:
            Lista de mensagens de erro (vazia se tudo OK)
        """
        errors = []

        for section in ('system', 'dispatcher', 'trading_bot'):
            if not isinstance(config.get(section), dict):
                errors.append(f"Seção obrigatória ausente: {section}")

        level = ConfigValidator._get_nested_value(config, 'system.log_level')
        if isinstance(level, str) and level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"system.log_level inválido: {level}")

        max_workers = ConfigValidator._get_nested_value(config, 'dispatcher.max_workers')
        if isinstance(max_workers, int) and max_workers < 1:
            errors.append("dispatcher.max_workers deve ser >= 1")

        sell_ratio = ConfigValidator._get_nested_value(config, 'trading_bot.sell_ratio')
        if isinstance(sell_ratio, (int, float)) and not 0 < sell_ratio <= 1:
            errors.append(f"trading_bot.sell_ratio fora de (0, 1]: {sell_ratio}")

        return errors

    @staticmethod
    def validate_types(config: Dict[str, Any]) -> List[str]:
        """Valida tipos de dados."""
        errors = []

        type_specs = {
            'system.log_level': str,
            'system.log_dir': str,
            'dispatcher.max_workers': (int, type(None)),
            'dispatcher.thread_name_prefix': str,
            'trading_bot.sell_ratio': (float, int),
        }

        for path, expected_types in type_specs.items():
            value = ConfigValidator._get_nested_value(config, path)
            if value is not None and not isinstance(value, expected_types):
                errors.append(f"{path} deve ser {expected_types}, mas é {type(value)}")
            elif isinstance(value, bool):
                errors.append(f"{path} não pode ser booleano")

        return errors

    @staticmethod
    def _get_nested_value(config: Dict, path: str) -> Any:
        """Obtém valor aninhado do config."""
        value = config

        for key in path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return None

        return value


class ConfigLoader:
    """Carregador principal de configurações."""

    # Padrão para variáveis de ambiente: ${VAR_NAME:default_value}
    ENV_VAR_PATTERN = re.compile(r'\$\{([^:}]+)(?::([^}]+))?\}')

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH, env_file: str = ".env"):
        """
        Args:
            config_path: Caminho do arquivo YAML
            env_file: Caminho do arquivo .env (opcional)
        """
        self.config_path = Path(config_path)
        self.env_file = Path(env_file)
        self._config_cache = None
        self._last_modified = None

        if self.env_file.exists():
            load_dotenv(self.env_file)
            logger.info(f"Variáveis de ambiente carregadas de {self.env_file}")

    def load(self, validate: bool = True) -> Dict[str, Any]:
        """
        Carrega configurações com cache e validação.

        Raises:
            ConfigurationError: Se houver erro na configuração
        """
        if self._is_cache_valid():
            return self._config_cache

        config = self._load_yaml()
        config = self._substitute_env_vars(config)
        config = self._merge_with_defaults(config)

        if validate:
            self._validate_config(config)

        self._config_cache = config
        self._last_modified = self.config_path.stat().st_mtime

        logger.info("Configuração carregada com sucesso")
        return config

    def _is_cache_valid(self) -> bool:
        if self._config_cache is None or self._last_modified is None:
            return False

        if not self.config_path.exists():
            return False

        return self.config_path.stat().st_mtime == self._last_modified

    def _load_yaml(self) -> Dict[str, Any]:
        """Carrega arquivo YAML."""
        if not self.config_path.exists():
            raise ConfigurationError(
                f"Arquivo de configuração não encontrado: {self.config_path}"
            )

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Erro ao parsear YAML: {e}")
        except OSError as e:
            raise ConfigurationError(f"Erro ao carregar configuração: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError("Configuração deve ser um dicionário")
        return config

    def _substitute_env_vars(self, obj: Any) -> Any:
        """
        Substitui variáveis de ambiente recursivamente.
        Formato: ${VAR_NAME:default_value}
        """
        if isinstance(obj, str):
            match = self.ENV_VAR_PATTERN.fullmatch(obj)
            if match:
                # A string inteira é uma variável: retorna o valor convertido
                return self._convert(os.environ.get(match.group(1), match.group(2)))

            return self.ENV_VAR_PATTERN.sub(
                lambda m: os.environ.get(m.group(1), m.group(2) or ''), obj
            )

        elif isinstance(obj, dict):
            return {k: self._substitute_env_vars(v) for k, v in obj.items()}

        elif isinstance(obj, list):
            return [self._substitute_env_vars(item) for item in obj]

        return obj

    @staticmethod
    def _convert(value: Any) -> Any:
        """Converte tipos básicos vindos do ambiente."""
        if not isinstance(value, str):
            return value
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'
        if value.lower() in ('null', 'none', '~'):
            return None
        try:
            return float(value) if '.' in value else int(value)
        except ValueError:
            return value

    def _merge_with_defaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        return self._deep_merge(self._get_default_config(), config)

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """Merge profundo de dicionários."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _validate_config(self, config: Dict[str, Any]) -> None:
        validator = ConfigValidator()

        errors = validator.validate_config(config)
        errors.extend(validator.validate_types(config))

        if errors:
            error_msg = "Erros de configuração encontrados:\n"
            error_msg += "\n".join(f"  - {error}" for error in errors)
            raise ConfigurationError(error_msg)

    def _get_default_config(self) -> Dict[str, Any]:
        """Retorna configuração padrão mínima."""
        return {
            'system': {
                'log_dir': 'logs',
                'log_level': 'INFO'
            },
            'dispatcher': {
                'max_workers': None,
                'thread_name_prefix': 'stock-notify'
            },
            'trading_bot': {
                'sell_ratio': 0.9
            }
        }

    def get_section(self, section: str) -> Dict[str, Any]:
        return self.load().get(section, {})

    def reload(self) -> Dict[str, Any]:
        """Força recarga da configuração."""
        self._config_cache = None
        self._last_modified = None
        return self.load()


@lru_cache(maxsize=1)
def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Carrega configurações (com cache)."""
    return ConfigLoader(config_path).load()


def get_config_value(path: str, default: Any = None,
                     config_path: str = DEFAULT_CONFIG_PATH) -> Any:
    """
    Obtém valor específico da configuração.

    Args:
        path: Caminho no formato 'section.subsection.key'
        default: Valor padrão se não encontrar
    """
    value = ConfigValidator._get_nested_value(load_config(config_path), path)
    return default if value is None else value


__all__ = [
    'ConfigLoader',
    'ConfigValidator',
    'ConfigurationError',
    'load_config',
    'get_config_value',
    'DEFAULT_CONFIG_PATH'
]
