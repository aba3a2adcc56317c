"""Tests for the console transcripts of the two scripts."""

import pytest

import bank_demo
import largest_sum

EXPECTED_TRANSCRIPT = """\
Account Number: SA001
Account Holder: John Doe
Balance: $5,775.00
Transaction History:
Deposit: $1,000.00
Withdrawal: -$500.00
Interest Deposit: $275.00

Account Number: CA001
Account Holder: Jane Smith
Balance: $1,900.00
Transaction History:
Deposit: $200.00
Withdrawal: -$300.00

Account Number: LA001
Account Holder: Alice Johnson
Balance: $10,450.00
Transaction History:
Withdrawal: -$500.00
Interest Deposit: $950.00

Transaction Details: Savings Account

Transaction Details: Checking Account

Transaction Details: Loan Account
"""


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run scripts from a temp dir so logs and .env lookups stay local."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('BANKDEMO_LOG_FILE', str(tmp_path / 'bankdemo.log'))
    # setenv first so values a .env file loads are removed again on teardown
    for name in ('BANKDEMO_SHOW_SUMMARY', 'BANKDEMO_CURRENCY_SYMBOL',
                 'BANKDEMO_LOG_LEVEL', 'BANKDEMO_TABLE_FORMAT'):
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)


def test_largest_sum_output(capsys):
    assert largest_sum.main() == 45
    assert capsys.readouterr().out == "Sum of largest odd and largest even: 45\n"


def test_bank_demo_transcript(capsys):
    bank_demo.main()
    assert capsys.readouterr().out == EXPECTED_TRANSCRIPT


def test_bank_demo_logs_to_file(tmp_path, capsys):
    bank_demo.main()
    capsys.readouterr()

    log = (tmp_path / 'bankdemo.log').read_text(encoding='utf-8')
    assert 'Opened Savings Account SA001 for John Doe' in log
    assert 'Transaction -1000 on LA002, balance 9000' in log


def test_bank_demo_summary(monkeypatch, capsys):
    monkeypatch.setenv('BANKDEMO_SHOW_SUMMARY', 'true')

    bank_demo.main()

    out = capsys.readouterr().out
    assert out.startswith(EXPECTED_TRANSCRIPT + "\n")
    summary = out[len(EXPECTED_TRANSCRIPT) + 1:]
    for account_no in ('SA001', 'CA001', 'LA001', 'SA002', 'CA002', 'LA002'):
        assert account_no in summary
    assert '$5,775.00' in summary


def test_bank_demo_reads_dotenv_from_working_directory(tmp_path, capsys):
    (tmp_path / '.env').write_text('BANKDEMO_CURRENCY_SYMBOL=€\n', encoding='utf-8')

    bank_demo.main()

    out = capsys.readouterr().out
    assert 'Balance: €5,775.00' in out
    assert 'Withdrawal: -€500.00' in out
