"""Sample weather and news used when live sources fail."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.analysis.chart import normalize_chart
from weather_dashboard.analysis.icons import icon_glyph
from weather_dashboard.analysis.report import UPDATE_TIME_FORMAT
from weather_dashboard.schemas import HourlySample, NewsItem, WeatherReport

if TYPE_CHECKING:
    from datetime import datetime

SAMPLE_NEWS: tuple[NewsItem, ...] = (
    NewsItem(
        title='新浪氏の処遇 経済同友会が協議 審査会は"辞任勧告が相当"',
        link="http://www3.nhk.or.jp/news/html/20250930/k10014936121000.html",
        description=(
            "経済同友会は、サプリメントをめぐる警察の捜査を受けて活動を自粛している、"
            "新浪剛史代表幹事の処遇について30日、理事会を開いて協議しています。"
        ),
        pub_date="09/30 12:19",
    ),
    NewsItem(
        title="10月 値上げの食品 半年ぶり3000品目超 7割が「酒類・飲料」",
        link="http://www3.nhk.or.jp/news/html/20250930/k10014935951000.html",
        description=(
            "10月に値上げされる食品は3000品目を超え、ことし4月以来、"
            "半年ぶりの高い水準になることが民間の調査でわかりました。"
        ),
        pub_date="09/30 11:26",
    ),
    NewsItem(
        title="首都高発注の道路清掃入札で談合か 4社に立ち入り検査 公取委",
        link="http://www3.nhk.or.jp/news/html/20250930/k10014936281000.html",
        description=(
            "首都高速道路が発注した道路清掃の入札をめぐり、東京や神奈川にある4社が、"
            "事前に落札する会社を調整する談合を繰り返した疑いがあるとして、"
            "公正取引委員会が、30日午前、立ち入り検査に入りました。"
        ),
        pub_date="09/30 11:46",
    ),
)

# (time, temp, description)
_SAMPLE_HOURLY: tuple[tuple[str, int, str], ...] = (
    ("12:00", 23, "晴れ"),
    ("15:00", 25, "晴れ"),
    ("18:00", 21, "曇り"),
    ("21:00", 19, "曇り"),
)


def sample_weather_report(now: datetime) -> WeatherReport:
    """Return the fixed sample report, stamped with ``now``.

    Used when the weather source fails; carries the sample news as its main
    news list and is flagged with ``is_using_fallback_data``.
    """
    hourly = [
        HourlySample(time=time, temp=temp, desc=desc, icon=icon_glyph(desc))
        for time, temp, desc in _SAMPLE_HOURLY
    ]
    return WeatherReport(
        location="東京",
        temperature=22,
        feels_like=25,
        description="晴れ",
        icon=icon_glyph("晴れ"),
        update_time=now.strftime(UPDATE_TIME_FORMAT),
        hourly=normalize_chart(hourly),
        news=list(SAMPLE_NEWS),
        is_using_fallback_data=True,
    )
