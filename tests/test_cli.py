import base64
import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from solders.pubkey import Pubkey

from solacc.cli import cli
from solacc.core.models import AccountRecord


def _record(pubkey: Pubkey, payload: bytes) -> AccountRecord:
    return AccountRecord(
        pubkey=str(pubkey),
        lamports=5_000,
        owner="AddressLookupTab1e1111111111111111111111111",
        data=[base64.b64encode(payload).decode(), "base64"],
    )


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, mock_rpc, args: list[str], env: dict[str, str] | None = None):
    with patch("solacc.orchestration.orchestrator.RPC", return_value=mock_rpc) as MockRPC:
        result = runner.invoke(cli, ["accs", *args], env=env or {"RPC_NODE": None})
    return result, MockRPC


def test_empty_result(runner: CliRunner, mock_rpc, program: str) -> None:
    result, MockRPC = _invoke(runner, mock_rpc, [program])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"program": program, "count": 0, "accounts": []}
    assert "Fetched 0 accounts" in result.stderr
    assert "Processed: 0" in result.stderr
    MockRPC.assert_called_once_with("https://solana-rpc.publicnode.com", timeout_s=900)


def test_raw_single_account(runner: CliRunner, mock_rpc, program: str, pubkeys: list[Pubkey]) -> None:
    mock_rpc.get_program_accounts.return_value = [_record(pubkeys[0], b"\x00\x01\x02")]

    result, _ = _invoke(runner, mock_rpc, [program])

    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["count"] == 1
    assert report["accounts"][0]["data"] == {"type": "raw", "hex": "000102", "base64": "AAEC", "size": 3}
    assert list(report) == ["program", "count", "accounts"]


def test_alt_decode(runner: CliRunner, mock_rpc, program: str, pubkeys: list[Pubkey], alt_bytes) -> None:
    mock_rpc.get_program_accounts.return_value = [_record(pubkeys[2], alt_bytes(pubkeys[:2]))]

    result, _ = _invoke(runner, mock_rpc, [program, "-t", "alt"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["accounts"][0]["data"] == {
        "type": "address_lookup_table",
        "addresses": [str(pubkeys[0]), str(pubkeys[1])],
        "num_addresses": 2,
    }


def test_alt_decode_failure_keeps_exit_code(
    runner: CliRunner, mock_rpc, program: str, pubkeys: list[Pubkey], alt_bytes
) -> None:
    mock_rpc.get_program_accounts.return_value = [
        _record(pubkeys[0], b"\x01" * 10),
        _record(pubkeys[1], alt_bytes([])),
    ]

    result, _ = _invoke(runner, mock_rpc, [program, "--parser", "alt"])

    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert [a["pubkey"] for a in report["accounts"]] == [str(pubkeys[1])]
    assert f"Failed to decode {pubkeys[0]}" in result.stderr


def test_parser_and_data_conflict(runner: CliRunner, mock_rpc, program: str) -> None:
    result, MockRPC = _invoke(runner, mock_rpc, [program, "-t", "alt", "-d", "0:8"])

    assert result.exit_code != 0
    MockRPC.assert_not_called()
    mock_rpc.get_program_accounts.assert_not_called()


@pytest.mark.parametrize(
    "args",
    [
        ["-t", "data"],
        ["-f", "10"],
        ["-f", "10:0xabc"],
        ["-f", "0:notanaddress"],
        ["-d", "8"],
        ["-s", "-1"],
        ["-s", "many"],
        ["-u", "http://[bad"],
        ["-u", "ftp://node.local"],
        ["-u", "http://"],
        ["-u", "node.local:8899"],
    ],
)
def test_invalid_arguments_fail_before_network(runner: CliRunner, mock_rpc, program: str, args: list[str]) -> None:
    result, MockRPC = _invoke(runner, mock_rpc, [program, *args])

    assert result.exit_code == 2
    MockRPC.assert_not_called()


def test_invalid_program_fails_before_network(runner: CliRunner, mock_rpc) -> None:
    result, MockRPC = _invoke(runner, mock_rpc, ["not-a-program"])

    assert result.exit_code == 2
    MockRPC.assert_not_called()


def test_filters_reach_rpc_in_order(runner: CliRunner, mock_rpc, program: str, pubkeys: list[Pubkey]) -> None:
    result, _ = _invoke(runner, mock_rpc, [program, "-f", "10:0xdead", "-f", f"0:{pubkeys[0]}", "-s", "56"])

    assert result.exit_code == 0, result.output
    called_program, cfg = mock_rpc.get_program_accounts.call_args.args
    assert called_program == program
    assert cfg["filters"] == [
        {"memcmp": {"offset": 10, "bytes": base64.b64encode(b"\xde\xad").decode(), "encoding": "base64"}},
        {"memcmp": {"offset": 0, "bytes": base64.b64encode(bytes(pubkeys[0])).decode(), "encoding": "base64"}},
        {"dataSize": 56},
    ]
    assert "dataSlice" not in cfg


def test_data_slice_reaches_rpc(runner: CliRunner, mock_rpc, program: str) -> None:
    result, _ = _invoke(runner, mock_rpc, [program, "-d", "4:16"])

    assert result.exit_code == 0, result.output
    _, cfg = mock_rpc.get_program_accounts.call_args.args
    assert cfg["dataSlice"] == {"offset": 4, "length": 16}
    assert "filters" not in cfg


def test_url_from_environment(runner: CliRunner, mock_rpc, program: str) -> None:
    _, MockRPC = _invoke(runner, mock_rpc, [program], env={"RPC_NODE": "http://node.local:8899"})
    MockRPC.assert_called_once_with("http://node.local:8899", timeout_s=900)

    _, MockRPC = _invoke(runner, mock_rpc, [program, "-u", "http://flag.local"], env={"RPC_NODE": "http://node.local:8899"})
    MockRPC.assert_called_once_with("http://flag.local", timeout_s=900)


def test_output_file(runner: CliRunner, mock_rpc, program: str, pubkeys: list[Pubkey], tmp_path: Path) -> None:
    mock_rpc.get_program_accounts.return_value = [_record(pubkeys[0], b"\xff")]
    out = tmp_path / "accounts.json"
    out.write_text("stale")

    result, _ = _invoke(runner, mock_rpc, [program, "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert result.stdout == ""
    assert json.loads(out.read_text())["count"] == 1
    assert f"Saved to {out}" in result.stderr


def test_output_write_error(runner: CliRunner, mock_rpc, program: str, tmp_path: Path) -> None:
    result, _ = _invoke(runner, mock_rpc, [program, "-o", str(tmp_path / "missing" / "out.json")])

    assert result.exit_code == 1


def test_rpc_error_exit_code(runner: CliRunner, mock_rpc, program: str) -> None:
    from solacc.core.errors import RpcError

    mock_rpc.get_program_accounts.side_effect = RpcError("RPC error: -32010 excluded")

    result, _ = _invoke(runner, mock_rpc, [program])

    assert result.exit_code == 1
    assert "excluded" in result.stderr


def test_invalid_url_from_environment_fails_before_network(runner: CliRunner, mock_rpc, program: str) -> None:
    result, MockRPC = _invoke(runner, mock_rpc, [program], env={"RPC_NODE": "not a url"})

    assert result.exit_code == 2
    MockRPC.assert_not_called()
