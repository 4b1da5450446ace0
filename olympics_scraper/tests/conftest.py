"""Shared fixtures for the scraper tests."""

from __future__ import annotations

import pytest

SCHEDULE_HTML = """
<html><body>
<table id="data_list">
  <tr><th>时间</th><th></th><th>项目</th><th>比赛</th><th>场馆</th></tr>
  <tr>
    <td> 15:00 </td><td><img src="x.png"></td><td>足球</td>
    <td>男子小组赛 A组</td><td>\n  王子公园  \n</td>
  </tr>
  <tr><td></td><td></td><td>广告</td><td></td><td></td></tr>
  <tr><td>17:00</td><td></td><td>橄榄球</td><td>男子七人制</td><td>法兰西体育场</td></tr>
  <tr><td>21:00</td><td></td><td>手球</td></tr>
</table>
</body></html>
"""

MEDAL_HTML = """
<body>
<table id="medal_list1">
  <tr><td></td><td>国家/地区</td><td>金</td><td>银</td><td>铜</td><td>总数</td></tr>
  <tr><td>1</td><td class="country"><a href="/medal/detail.shtml?countryid=USA&x=2">美国</a></td>
      <td>10</td><td>5</td><td>3</td><td>18</td></tr>
  <tr><td>2</td><td class="country"><a href="/medal/detail.shtml?countryid=CHN">中国</a></td>
      <td>9</td><td>7</td><td>2</td><td>18</td></tr>
  <tr><td>3</td><td class="country"><a>法国</a></td>
      <td>5</td><td>5</td><td>5</td><td>15</td></tr>
</table>
</body>
"""


@pytest.fixture
def schedule_html() -> str:
    return SCHEDULE_HTML


@pytest.fixture
def medal_html() -> str:
    return MEDAL_HTML
