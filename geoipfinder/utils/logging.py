import json
import logging
import contextvars
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# Identificador de la petición en curso, para correlacionar las líneas de log
request_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)

# Atributos propios de LogRecord que no deben volcarse como campos extra
_RESERVED_FIELDS = {
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
}


def set_request_id(request_id: Optional[str]) -> None:
    """Establece el identificador de la petición actual."""
    request_id_var.set(request_id)


def get_request_id() -> Optional[str]:
    return request_id_var.get()


class StructuredJSONFormatter(logging.Formatter):
    """
    Formateador de logs en JSON (una línea por registro).

    Incluye el request_id si está establecido, la excepción con su traza y
    cualquier campo pasado con ``extra=``.
    """

    def _serialize_value(self, value: Any) -> Any:
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        if isinstance(value, dict):
            return {str(k): self._serialize_value(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(v) for v in value]
        if isinstance(value, datetime):
            return value.isoformat()
        # Modelos Pydantic (Address, GeoRecord...)
        if hasattr(value, "model_dump"):
            return self._serialize_value(value.model_dump())
        return str(value)

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "line": record.lineno,
        }

        request_id = get_request_id()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_FIELDS and not key.startswith("_"):
                log_data[key] = self._serialize_value(value)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    level: int | str = logging.INFO,
    json_format: bool = False,
    logger_name: str = "geoipfinder"
) -> logging.Logger:
    """
    Configura el logging del proyecto.

    Args:
        level: Nivel de logging, numérico o por nombre ("DEBUG", "INFO"...)
        json_format: Si es True, usa StructuredJSONFormatter
        logger_name: Nombre del logger raíz del proyecto

    Returns:
        logging.Logger: Logger configurado
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Evitar duplicar manejadores si ya están configurados
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()

        if json_format:
            formatter = StructuredJSONFormatter()
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
