"""CLI unit tests: dry-run plan, execution paths and exit codes."""

from __future__ import annotations

import json

from gemini_client.base.http import TransportResponse
from gemini_client.cli import main
from gemini_client.cli.cli_actions import handle_run, plan_run
from gemini_client.cli.cli_parser import build_parser
from gemini_client.gemini import ChatModel


def _run(argv, chat_model=None) -> int:
    return handle_run(build_parser().parse_args(argv), chat_model)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.prompt is None
    assert args.execute is False
    assert args.json is False


def test_dry_run_prints_plan_without_credentials(monkeypatch, capsys):
    monkeypatch.setenv("GEMINI_API_KEY", "very-secret")
    code = main(["--prompt", "hi", "--model", "gemini-1.5-pro"])
    out = capsys.readouterr().out
    assert code == 0
    assert "very-secret" not in out
    plan = json.loads(out)
    assert plan["uri"].endswith("/models/gemini-1.5-pro:generateContent")
    assert plan["has_api_key"] is True
    assert plan["valid"] is True
    assert plan["outbound_headers"] == {"Content-Type": "application/json"}
    assert plan["body"] == {"contents": [{"parts": [{"text": "hi"}], "role": "user"}]}


def test_plan_without_prompt_is_invalid():
    plan = plan_run(model=None, base_url=None, prompt=None)
    assert plan["valid"] is False
    assert plan["has_api_key"] is False


def test_execute_prints_text(monkeypatch, capsys, fake_transport):
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    code = _run(["--prompt", "hi", "--execute"], ChatModel(transport=fake_transport))
    assert code == 0
    assert capsys.readouterr().out.strip() == "Hello there"
    assert len(fake_transport.calls) == 1


def test_execute_json_output(monkeypatch, capsys, fake_transport):
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    code = _run(["-p", "hi", "--execute", "--json"], ChatModel(transport=fake_transport))
    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["status_code"] == 200
    assert data["body"]["candidates"][0]["contents"][0]["parts"] == [{"text": "Hello there"}]


def test_execute_unsuccessful_response_exits_1(monkeypatch, capsys, make_transport):
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    envelope = {"error": {"code": 403, "message": "Permission denied"}}
    transport = make_transport(response=TransportResponse(status_code=403, text=json.dumps(envelope)))
    code = _run(["-p", "hi", "--execute"], ChatModel(transport=transport))
    err_lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    assert code == 1
    assert {"error": "Permission denied", "status": 403} in err_lines


def test_execute_without_key_exits_2(capsys, fake_transport):
    code = _run(["-p", "hi", "--execute"], ChatModel(transport=fake_transport))
    assert code == 2
    assert '"missing_api_key"' in capsys.readouterr().err
    assert fake_transport.calls == []


def test_execute_without_prompt_exits_2(capsys):
    code = _run(["--execute"])
    assert code == 2
    assert "--prompt is required" in capsys.readouterr().err
