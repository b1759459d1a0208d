import threading


class ViteStatusService:
    """
    Shared state between every service that reads the Vite manifest: whether
    the Vite dev server serves the assets, and whether the one time manifest
    notice has already been logged.
    """

    def __init__(self, dev_server_enabled: bool = False):
        self._dev_server_enabled = dev_server_enabled
        self._warn_about_manifest = True
        self._lock = threading.Lock()

    @property
    def dev_server_enabled(self) -> bool:
        return self._dev_server_enabled

    def warn_about_manifest_once(self) -> bool:
        with self._lock:
            should_warn = self._warn_about_manifest
            self._warn_about_manifest = False
        return should_warn
