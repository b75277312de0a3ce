from tagmark.cli import cli


def test_render(runner):
    result = runner.invoke(cli, ['render', 'div', '-a', 'id=foo', '-a', 'class=bar', 'Hello world!'])
    assert result.exit_code == 0
    assert result.output == '<div id="foo" class="bar">Hello world!</div>\n'


def test_render_flag(runner):
    result = runner.invoke(cli, ['render', 'button', '-a', 'type=button', '-f', 'disabled', 'go'])
    assert result.exit_code == 0
    assert result.output == '<button type="button" disabled>go</button>\n'


def test_render_policy(runner):
    result = runner.invoke(cli, ['render', '--policy', 'noVoid', 'link', 'http://example.com'])
    assert result.exit_code == 0
    assert result.output == '<link>http://example.com</link>\n'

    result = runner.invoke(cli, ['render', '--policy', 'void', 'div', 'ignored'])
    assert result.exit_code == 0
    assert result.output == '<div>\n'


def test_render_bad_name(runner):
    result = runner.invoke(cli, ['render', 'bad tag'])
    assert result.exit_code == 2
    assert 'whitespace' in result.output


def test_render_bad_attr(runner):
    result = runner.invoke(cli, ['render', 'div', '-a', 'novalue'])
    assert result.exit_code == 2
    assert 'KEY=VALUE' in result.output


def test_sanitize(runner):
    result = runner.invoke(cli, ['sanitize', '<img src="a&b">'])
    assert result.exit_code == 0
    assert result.output == '&lt;img src=&quot;a&amp;b&quot;&gt;\n'


def test_sanitize_toggles(runner):
    result = runner.invoke(cli, ['sanitize', '--no-lt', '--no-gt', '<br>'])
    assert result.exit_code == 0
    assert result.output == '<br>\n'


def test_sanitize_stdin(runner):
    result = runner.invoke(cli, ['sanitize'], input='a & b\n')
    assert result.exit_code == 0
    assert result.output == 'a &amp; b\n'
