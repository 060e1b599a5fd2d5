"""Tests for PayloadExporter."""
from graphql_template.exporter.payload_exporter import PayloadExporter


class TestPayloadExporter:
    """Test writing payloads."""

    def test_export_creates_parents(self, tmp_path):
        """Missing directories are created."""
        output = tmp_path / "out" / "nested" / "payload.json"

        path = PayloadExporter().export(output, '{"query":"q\\n","variables":null}')

        assert path == output
        assert output.read_text(encoding="utf-8") == '{"query":"q\\n","variables":null}'

    def test_export_writes_utf8_unchanged(self, tmp_path):
        """Payload bytes are written as built, without trailing newline."""
        output = tmp_path / "payload.json"
        payload = '{"query":"query { city(name: \\"São Paulo\\") }\\n","variables":null}'

        PayloadExporter().export(str(output), payload)

        assert output.read_bytes() == payload.encode("utf-8")
