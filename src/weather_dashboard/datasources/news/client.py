"""NHK news RSS constants.

Feed list: https://www.nhk.or.jp/toppage/rss/index.html
"""

NEWS_FEED_URL = "https://www3.nhk.or.jp/rss/news/cat0.xml"  # main headlines
ECONOMY_FEED_URL = "https://www3.nhk.or.jp/rss/news/cat5.xml"  # economy

MAX_NEWS_ITEMS = 5
# Economy items are fetched generously, then thinned by de-duplication
MAX_ECONOMY_NEWS_ITEMS = 10

PUB_DATE_FORMAT = "%m/%d %H:%M"
