from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase, main
from unittest.mock import patch

from servicesdb.main import main as servicesdb_main


class TestMain(TestCase):
    def setUp(self):
        self.tmpdir = TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.services_file = Path(self.tmpdir.name) / "services"
        self.services_file.write_text("ssh 22/tcp\nssh 22/udp\nhttp 80/tcp www\nbroken\n", encoding="utf-8")

    def run_main(self, **kwargs):
        out = StringIO()
        with patch("servicesdb.main.get_kwargs", return_value=kwargs), redirect_stdout(out):
            servicesdb_main()
        return out.getvalue().splitlines()

    def test_protocol_filter(self):
        lines = self.run_main(services_file=str(self.services_file), ignore_errors=True, protocol="tcp")
        self.assertEqual(lines, ["ssh\t22/tcp\t", "http\t80/tcp\twww"])

    def test_error_exits(self):
        with self.assertRaises(SystemExit) as e, self.assertLogs("servicesdb", level="ERROR"):
            self.run_main(services_file=str(self.services_file))
        self.assertEqual(e.exception.code, 1)


if __name__ == "__main__":
    main()
