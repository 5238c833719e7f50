"""
List synchronization controller shared by every back office screen.

A ListSyncController owns the in-memory copy of one resource's collection
and derives the page the user sees from it:

    UI action -> controller method -> ResourceService call
              -> merge the response into the collection -> recompute page

The collection is the only source of truth. It is replaced by a full
fetch on load() and patched locally after each successful write, never
re-fetched. Failed calls leave it untouched and raise a transient error
banner instead; banners disappear BANNER_SECONDS after they are raised.
"""

import time
from datetime import tzinfo
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from backoffice_ui.errors import BackofficeError, describe_error
from backoffice_ui.lib import logs
from backoffice_ui.models.common import (
    Banner,
    BannerKind,
    DialogMode,
    DialogState,
    FilterCriteria,
    PageWindow,
)
from backoffice_ui.models.records import record_to_draft
from backoffice_ui.resources import ResourceSpec
from backoffice_ui.services.resource_service import ResourceService
from backoffice_ui.utils import PAGE_SIZE, matches_date, matches_text, page_slice, total_pages

LOG = logs.logger(__file__)

T = TypeVar("T")

BANNER_SECONDS = 3.0

Confirm = Callable[[str], bool]


class ListSyncController(Generic[T]):
    """
    Keeps (collection, filter, page) consistent for one resource.

    Attributes:
        resource: ResourceSpec of the listed resource.
        service: Backend access for the resource.
        page_size: Rows per page.
        criteria: Filter applied by the last load.
        page: Current 1-indexed page, always within [1, total_pages].
        dialog: State of the add/edit dialog.
        detail: Record fetched by the last show_details() call.
        loading: True while load() waits for the backend.
    """

    def __init__(
        self,
        resource: ResourceSpec,
        service: ResourceService,
        *,
        confirm: Confirm | None = None,
        page_size: int = PAGE_SIZE,
        clock: Callable[[], float] = time.monotonic,
        tz: tzinfo | None = None,
    ) -> None:
        """
        Initialize an empty controller; call load() to populate it.

        Args:
            resource: ResourceSpec of the listed resource.
            service: Backend access for the resource.
            confirm: Asks the user a yes/no question before deletes.
            page_size: Rows per page.
            clock: Monotonic clock used for banner expiry.
            tz: Zone whose calendar the date filter uses; None for local.
        """
        self.resource = resource
        self.service = service
        self.page_size = page_size
        self.criteria = FilterCriteria()
        self.page = 1
        self.dialog = DialogState()
        self.detail: Any = None
        self.loading = False
        self._confirm = confirm
        self._clock = clock
        self._tz = tz
        self._all: list[T] = []
        self._window: list[T] = []
        self._success: Banner | None = None
        self._error: Banner | None = None

    # ------------------------------------------------------------------ #
    # Derived view
    # ------------------------------------------------------------------ #

    @property
    def records(self) -> Sequence[T]:
        """The filtered collection, in server order."""
        return tuple(self._all)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self._all), self.page_size)

    @property
    def window(self) -> PageWindow[T]:
        """The page currently rendered."""
        return PageWindow(
            items=tuple(self._window),
            page=self.page,
            total_pages=self.total_pages,
            total=len(self._all),
        )

    @property
    def success_message(self) -> str | None:
        return self._active_text(self._success)

    @property
    def error_message(self) -> str | None:
        return self._active_text(self._error)

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #

    def load(self, criteria: FilterCriteria | None = None) -> bool:
        """
        Fetch the whole collection and keep the records matching criteria.

        On failure the previous collection and page are kept and an error
        banner is raised.

        Args:
            criteria: New filter; None re-applies the current one.

        Returns:
            True if the collection was replaced.
        """
        if criteria is not None:
            self.criteria = criteria
        LOG.info("load - resource:%s criteria:%s", self.resource.name, self.criteria)
        self.loading = True
        try:
            fetched = self.service.list_records()
        except BackofficeError as exc:
            LOG.error("load failed - resource:%s", self.resource.name, exc_info=True)
            self._flash(BannerKind.ERROR, describe_error(exc, self.resource.messages.load_error))
            return False
        finally:
            self.loading = False

        self._all = [record for record in fetched if self._matches(record)]
        self._refresh()
        LOG.info(
            "load complete - resource:%s fetched:%d kept:%d",
            self.resource.name,
            len(fetched),
            len(self._all),
        )
        return True

    def create(self, draft: Mapping[str, Any]) -> T | None:
        """
        Create a record and append the server's version to the collection.

        The add dialog closes only on success.

        Returns:
            The created record, or None if the call failed.
        """
        messages = self.resource.messages
        try:
            record = self.service.create_record(draft)
        except BackofficeError as exc:
            LOG.error("create failed - resource:%s", self.resource.name, exc_info=True)
            self._flash(BannerKind.ERROR, describe_error(exc, messages.create_error))
            return None

        self._all.append(self.resource.to_row(record))
        self._refresh()
        self.close_dialog()
        self._flash(BannerKind.SUCCESS, messages.created)
        return record

    def update(self, record_id: str, draft: Mapping[str, Any]) -> T | None:
        """
        Replace a record and swap the server's version into the collection.

        Returns:
            The updated record, or None if the call failed.
        """
        messages = self.resource.messages
        record_id = str(record_id)
        try:
            record = self.service.update_record(record_id, draft)
        except BackofficeError as exc:
            LOG.error("update failed - resource:%s id:%s", self.resource.name, record_id, exc_info=True)
            self._flash(BannerKind.ERROR, describe_error(exc, messages.update_error))
            return None

        row = self.resource.to_row(record)
        self._all = [row if self.resource.record_id(r) == record_id else r for r in self._all]
        self._refresh()
        self.close_dialog()
        self._flash(BannerKind.SUCCESS, messages.updated)
        return record

    def remove(self, record_id: str, confirm: Confirm | None = None) -> bool:
        """
        Delete a record after the user confirms.

        The request is sent even when the id is not in the collection; the
        backend decides whether it exists.

        Args:
            record_id: Identifier of the record.
            confirm: Overrides the controller's confirmation callback.

        Returns:
            True if the record was deleted.

        Raises:
            ValueError: If no confirmation callback is available.
        """
        messages = self.resource.messages
        record_id = str(record_id)
        confirmer = confirm or self._confirm
        if confirmer is None:
            raise ValueError("remove() needs a confirmation callback")
        if not confirmer(messages.confirm_delete):
            LOG.info("remove declined - resource:%s id:%s", self.resource.name, record_id)
            return False

        try:
            self.service.delete_record(record_id)
        except BackofficeError as exc:
            LOG.error("remove failed - resource:%s id:%s", self.resource.name, record_id, exc_info=True)
            self._flash(BannerKind.ERROR, describe_error(exc, messages.delete_error))
            return False

        self._all = [r for r in self._all if self.resource.record_id(r) != record_id]
        self._refresh()
        self._flash(BannerKind.SUCCESS, messages.deleted)
        return True

    def set_page(self, page: int) -> bool:
        """
        Move to another page of the already filtered collection.

        Out-of-range pages are ignored, not clamped.

        Returns:
            True if the page changed.
        """
        if not 1 <= page <= self.total_pages:
            return False
        self.page = page
        self._window = page_slice(self._all, self.page, self.page_size)
        return True

    # ------------------------------------------------------------------ #
    # Dialogs and details
    # ------------------------------------------------------------------ #

    def open_add_dialog(self) -> None:
        self.dialog = DialogState(mode=DialogMode.ADD)

    def open_edit_dialog(self, record_id: str) -> bool:
        """
        Open the edit dialog pre-filled with a record.

        Summary-list resources fetch the full record first; the others use
        the row already in memory.

        Returns:
            True if the dialog was opened.
        """
        record_id = str(record_id)
        if self.resource.detail_prefetch:
            try:
                record = self.service.get_record(record_id)
            except BackofficeError as exc:
                LOG.error("edit prefetch failed - id:%s", record_id, exc_info=True)
                self._flash(BannerKind.ERROR, describe_error(exc, self.resource.messages.detail_error))
                return False
        else:
            record = next((r for r in self._all if self.resource.record_id(r) == record_id), None)
            if record is None:
                return False
        self.dialog = DialogState(mode=DialogMode.EDIT, record_id=record_id, draft=record_to_draft(record))
        return True

    def close_dialog(self) -> None:
        self.dialog = DialogState()

    def submit_dialog(self, draft: Mapping[str, Any] | None = None) -> T | None:
        """Create or update from the open dialog, merging draft over its values."""
        merged = {**self.dialog.draft, **(draft or {})}
        self.dialog.draft = merged
        if self.dialog.mode is DialogMode.ADD:
            return self.create(merged)
        if self.dialog.mode is DialogMode.EDIT and self.dialog.record_id is not None:
            return self.update(self.dialog.record_id, merged)
        return None

    def show_details(self, record_id: str) -> Any:
        """Fetch one full record for the detail view."""
        try:
            self.detail = self.service.get_record(str(record_id))
        except BackofficeError as exc:
            LOG.error("details failed - id:%s", record_id, exc_info=True)
            self.detail = None
            self._flash(BannerKind.ERROR, describe_error(exc, self.resource.messages.detail_error))
        return self.detail

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _matches(self, record: Any) -> bool:
        criteria = self.criteria
        if self.resource.date_field and not matches_date(
            getattr(record, self.resource.date_field, None), criteria, self._tz
        ):
            return False
        return matches_text(
            getattr(record, self.resource.search_field, None),
            criteria.search,
            self.resource.search_case_insensitive,
        )

    def _refresh(self) -> None:
        """Recompute the window, pulling a stale page back into range."""
        self.page = min(max(self.page, 1), self.total_pages)
        self._window = page_slice(self._all, self.page, self.page_size)

    def _flash(self, kind: BannerKind, text: str) -> None:
        banner = Banner(kind=kind, text=text, expires_at=self._clock() + BANNER_SECONDS)
        if kind is BannerKind.SUCCESS:
            self._success = banner
        else:
            self._error = banner

    def _active_text(self, banner: Banner | None) -> str | None:
        if banner is None or not banner.active(self._clock()):
            return None
        return banner.text
