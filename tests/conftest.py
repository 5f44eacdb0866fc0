import io

import pytest
from rich.console import Console

LINE_200 = ('192.168.1.1 - - [10/Oct/2023:13:55:36] "GET /index.html HTTP/1.1" '
            '200 512 "-" "Mozilla/5.0"')
LINE_404 = ('192.168.1.1 - - [10/Oct/2023:13:55:37] "GET /index.html HTTP/1.1" '
            '404 0 "-" "Mozilla/5.0"')


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def sample_lines():
    return [LINE_200, LINE_404]
