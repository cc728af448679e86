"""
Task Form Controller

Headless controller behind the task form. It owns the form state (workspace
list, selected workspace, field values, status line) and talks to the proxy;
a front end renders that state and subscribes to status changes.

Lifecycle:
    1. ``load`` fetches workspaces; the form becomes visible only on success.
    2. The front end fills ``fields`` and picks a workspace.
    3. ``submit`` shapes the fields into a task payload and posts it; on
       success the form is reset and the due date default recomputed.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional

from src.services.task_normalizer import DEFAULT_DUE_IN_DAYS, DURATION_SENTINELS
from src.utils.logger import setup_logger
from src.utils.parsing import parse_int, prune_blank

from .proxy_client import ProxyClient, ProxyRequestError

logger = setup_logger(__name__)

CUSTOM_DURATION = "custom"
DEFAULT_DURATION_PRESET = "30"

# Named fields of the form and their values after a reset. The due date is
# filled in separately because it depends on the current day.
FORM_FIELDS: Dict[str, Any] = {
    "name": "",
    "description": "",
    "priority": "",
    "dueDate": "",
    "duration": DEFAULT_DURATION_PRESET,
    "customDuration": "",
    "startDate": "",
    "deadlineType": "",
}

# Flat fields that only feed other fields and must not be sent as-is.
_NESTED_OR_DERIVED = ("customDuration", "startDate", "deadlineType")

STATUS_INFO = "info"
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


@dataclass
class FormStatus:
    """Text shown in the form's status area."""
    text: str = ""
    level: str = STATUS_INFO


def resolve_duration(preset: Any, custom: Any) -> Any:
    """
    Duration to submit.

    The custom value only counts when the preset is ``custom``. Sentinels
    pass through; anything else is read as a whole number of minutes, and
    None means "let the proxy decide".
    """
    if preset == CUSTOM_DURATION and custom:
        return parse_int(custom)
    if isinstance(preset, str) and preset in DURATION_SENTINELS:
        return preset
    return parse_int(preset)


def build_task_payload(fields: Dict[str, Any], workspace_id: str, today: date) -> Dict[str, Any]:
    """
    Shape flat form fields into the JSON body for ``/add-task``.

    Args:
        fields: Named form fields
        workspace_id: Currently selected workspace ('' when none)
        today: Client's current date, used when no start date was entered
    """
    task = dict(fields)
    task["workspaceId"] = workspace_id

    auto_scheduled = {
        "startDate": task.get("startDate") or today.isoformat(),
        "deadlineType": task.get("deadlineType"),
    }
    task["autoScheduled"] = prune_blank(auto_scheduled)

    task["duration"] = resolve_duration(task.get("duration"), task.get("customDuration"))

    for key in _NESTED_OR_DERIVED:
        task.pop(key, None)

    return prune_blank(task)


class TaskFormController:
    """
    State and actions of the task form.

    The workspace list lives on the instance; nothing is shared between
    controllers.
    """

    def __init__(self, proxy: ProxyClient, today: Callable[[], date] = date.today):
        """
        Args:
            proxy: Client for the task proxy
            today: Returns the client's current date; injectable for tests
        """
        self.proxy = proxy
        self.today = today

        self.workspaces: List[Dict[str, Any]] = []
        self.selected_workspace_id: str = ""
        self.form_visible = False
        self.fields: Dict[str, Any] = {}
        self.status = FormStatus()
        self._listeners: List[Callable[[FormStatus], None]] = []

        self.reset_form()

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Callable[[FormStatus], None]) -> None:
        """Call ``listener`` whenever the status line changes."""
        self._listeners.append(listener)

    def _set_status(self, text: str, level: str = STATUS_INFO) -> None:
        self.status = FormStatus(text, level)
        for listener in self._listeners:
            listener(self.status)

    def default_due_date(self) -> str:
        """Today plus seven days, as YYYY-MM-DD."""
        return (self.today() + timedelta(days=DEFAULT_DUE_IN_DAYS)).isoformat()

    def reset_form(self) -> None:
        """Restore every field to its default and recompute the due date."""
        self.fields = dict(FORM_FIELDS)
        self.fields["dueDate"] = self.default_due_date()

    def update_fields(self, **values: Any) -> None:
        """Set form fields; unknown names are kept and submitted as-is."""
        self.fields.update(values)

    def select_workspace(self, workspace_id: str) -> None:
        self.selected_workspace_id = workspace_id

    @property
    def custom_duration_enabled(self) -> bool:
        """Whether the custom duration input applies."""
        return self.fields.get("duration") == CUSTOM_DURATION

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def load(self) -> bool:
        """
        Fetch the workspace list and reveal the form.

        On failure the error is shown and the form stays hidden. There is
        no retry.
        """
        try:
            logger.info("Fetching workspaces...")
            data = await self.proxy.list_workspaces()
        except ProxyRequestError as e:
            logger.error(f"Error loading workspaces: {e}")
            self._set_status(
                f"Error loading workspaces: {e}. "
                "Please check the logs for more details and try again.",
                STATUS_ERROR
            )
            return False

        workspaces = data.get("workspaces")
        self.workspaces = [ws for ws in workspaces if isinstance(ws, dict)] if isinstance(workspaces, list) else []
        ids = [str(ws.get("id")) for ws in self.workspaces]
        default_id = data.get("defaultWorkspaceId")

        if default_id and default_id in ids:
            self.selected_workspace_id = default_id
        elif default_id:
            # A stale default matches no option, which leaves nothing selected.
            self.selected_workspace_id = ""
        else:
            self.selected_workspace_id = ids[0] if ids else ""

        self.form_visible = True
        self._set_status("")
        self.fields["dueDate"] = self.default_due_date()
        return True

    async def set_default_workspace(self) -> bool:
        """Store the selected workspace as the default; no local state changes."""
        try:
            await self.proxy.set_default_workspace(self.selected_workspace_id)
        except ProxyRequestError as e:
            logger.error(f"Error setting default workspace: {e}")
            self._set_status("Error setting default workspace", STATUS_ERROR)
            return False
        self._set_status("Default workspace set successfully", STATUS_SUCCESS)
        return True

    def build_payload(self) -> Dict[str, Any]:
        """The body ``submit`` would send for the current form state."""
        return build_task_payload(self.fields, self.selected_workspace_id, self.today())

    async def submit(self) -> Optional[str]:
        """
        Send the form to the proxy.

        Returns:
            Motion task id on success, None on failure
        """
        payload = self.build_payload()
        self._set_status("Adding task...")
        try:
            result = await self.proxy.add_task(payload)
        except ProxyRequestError as e:
            self._set_status(e.message or "Error adding task", STATUS_ERROR)
            return None

        self._set_status(result.get("message", "Task added successfully"), STATUS_SUCCESS)
        self.reset_form()
        return result.get("taskId")
