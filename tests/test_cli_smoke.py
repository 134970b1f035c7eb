import json
import os
import subprocess
import sys
from pathlib import Path

PKG = 'jastylelint'
ROOT = Path(__file__).resolve().parents[1]


def _run_cli(args):
    exe = [sys.executable, '-m', PKG + '.cli']
    cp = subprocess.run(exe + args, cwd=str(ROOT), capture_output=True, text=True, encoding='utf-8',
                        env=dict(os.environ, PYTHONIOENCODING='utf-8'))
    return cp.returncode, cp.stdout, cp.stderr


def _sample(tmp_path, text='確認して下さい。'):
    p = tmp_path / 'sample.txt'
    p.write_text(text, encoding='utf-8')
    return str(p)


def test_text_output(tmp_path):
    code, out, err = _run_cli(['--no-morph', _sample(tmp_path)])
    assert code == 0
    assert 'rule: kanji-opening' in out
    assert ':1:5: [WARN]' in out
    assert 'Total:' in out


def test_no_issues(tmp_path):
    code, out, err = _run_cli(['--no-morph', _sample(tmp_path, '問題ありません。')])
    assert code == 0
    assert out.strip() == 'No issues found.'


def test_fail_on_issue(tmp_path):
    code, out, err = _run_cli(['--no-morph', '--fail-on-issue', _sample(tmp_path)])
    assert code == 1


def test_json_output(tmp_path):
    code, out, err = _run_cli(['--no-morph', '--json', _sample(tmp_path)])
    assert code == 0
    data = json.loads(out)
    assert data[0]['file'].endswith('sample.txt')
    assert any(d['code'] == 'kanji-opening' for d in data[0]['diagnostics'])


def test_disable_and_set(tmp_path):
    path = _sample(tmp_path, '確認して下さい。' + 'あ' * 30 + '。')
    code, out, err = _run_cli(['--no-morph', '--disable', 'kanji-opening', '--set', 'long_sentence_threshold=10', path])
    assert 'rule: kanji-opening' not in out
    assert 'rule: long-sentence' in out


def test_min_severity_hides_warnings(tmp_path):
    code, out, err = _run_cli(['--no-morph', '--min-severity', 'ERROR', _sample(tmp_path)])
    assert out.strip() == 'No issues found.'


def test_rules_file(tmp_path):
    rules = tmp_path / 'rules.yaml'
    rules.write_text('Pytorch: PyTorch\n', encoding='utf-8')
    code, out, err = _run_cli(['--no-morph', '--rules', str(rules), _sample(tmp_path, 'Pytorchで学習する')])
    assert 'rule: term-notation' in out


def test_bad_configuration_exits_2(tmp_path):
    path = _sample(tmp_path)
    code, out, err = _run_cli(['--rules', str(tmp_path / 'missing.yaml'), path])
    assert code == 2
    assert '[warn]' in err
    code, out, err = _run_cli(['--set', 'no_such_key=1', path])
    assert code == 2
    code, out, err = _run_cli(['--enable', 'no-such-rule', path])
    assert code == 2


def test_list_rules():
    code, out, err = _run_cli(['--list-rules'])
    assert code == 0
    assert '[off] particle-repetition' in out
    assert '[on ] ra-nuki-detection (ra-nuki)' in out


def test_evals_report():
    code, out, err = _run_cli(['--no-morph', '--evals'])
    assert code == 0
    assert out.startswith('# Japanese Grammar Evals Report')
    assert '![Coverage](https://img.shields.io/badge/coverage-' in out
    assert '=== Japanese Grammar Evals Report ===' in err


def test_morph_toggle_flags(tmp_path):
    path = _sample(tmp_path)
    code1, out1, err1 = _run_cli(['--no-morph', path])
    code2, out2, err2 = _run_cli(['--morph', path])
    assert code1 == 0 and code2 == 0
    assert 'Total:' in out2
