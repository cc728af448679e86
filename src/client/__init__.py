"""
Client - Task form controller and the HTTP client it uses to reach the proxy
"""
from .proxy_client import ProxyClient, ProxyRequestError
from .form_controller import FormStatus, TaskFormController, build_task_payload

__all__ = [
    "ProxyClient",
    "ProxyRequestError",
    "FormStatus",
    "TaskFormController",
    "build_task_payload",
]
