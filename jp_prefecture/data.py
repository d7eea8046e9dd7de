"""
Static prefecture table.

Each row holds the fixed reference data for one of Japan's 47 prefectures,
keyed by its JIS X 0401 code. Short forms are derived from the administrative
suffix of the kanji name when the row is created.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple, Dict


# Administrative suffix -> (hiragana reading, katakana reading)
ADMINISTRATIVE_SUFFIXES: Dict[str, Tuple[str, str]] = {
    "都": ("と", "ト"),
    "府": ("ふ", "フ"),
    "県": ("けん", "ケン"),
}


def _strip_suffix(value: str, suffix: str) -> str:
    if suffix and value.endswith(suffix):
        return value[:-len(suffix)]
    return value


@dataclass(frozen=True)
class PrefectureRecord:
    """Reference data for a single prefecture."""

    code: int
    kanji: str
    hiragana: str
    katakana: str
    english: str

    kanji_short: str = field(init=False)
    hiragana_short: str = field(init=False)
    katakana_short: str = field(init=False)

    def __post_init__(self):
        suffix = self.kanji[-1]
        if suffix in ADMINISTRATIVE_SUFFIXES:
            hiragana_suffix, katakana_suffix = ADMINISTRATIVE_SUFFIXES[suffix]
        else:
            # 北海道 keeps its full name
            suffix = hiragana_suffix = katakana_suffix = ""

        object.__setattr__(self, 'kanji_short', _strip_suffix(self.kanji, suffix))
        object.__setattr__(self, 'hiragana_short', _strip_suffix(self.hiragana, hiragana_suffix))
        object.__setattr__(self, 'katakana_short', _strip_suffix(self.katakana, katakana_suffix))


# Fields that identify a prefecture, in lookup order
NAME_FIELDS: Tuple[str, ...] = (
    'kanji',
    'kanji_short',
    'hiragana',
    'hiragana_short',
    'katakana',
    'katakana_short',
    'english',
)

ALL_FIELDS: Tuple[str, ...] = ('code',) + NAME_FIELDS


PREFECTURE_RECORDS: Tuple[PrefectureRecord, ...] = (
    PrefectureRecord(1, "北海道", "ほっかいどう", "ホッカイドウ", "hokkaido"),
    PrefectureRecord(2, "青森県", "あおもりけん", "アオモリケン", "aomori"),
    PrefectureRecord(3, "岩手県", "いわてけん", "イワテケン", "iwate"),
    PrefectureRecord(4, "宮城県", "みやぎけん", "ミヤギケン", "miyagi"),
    PrefectureRecord(5, "秋田県", "あきたけん", "アキタケン", "akita"),
    PrefectureRecord(6, "山形県", "やまがたけん", "ヤマガタケン", "yamagata"),
    PrefectureRecord(7, "福島県", "ふくしまけん", "フクシマケン", "fukushima"),
    PrefectureRecord(8, "茨城県", "いばらきけん", "イバラキケン", "ibaraki"),
    PrefectureRecord(9, "栃木県", "とちぎけん", "トチギケン", "tochigi"),
    PrefectureRecord(10, "群馬県", "ぐんまけん", "グンマケン", "gunma"),
    PrefectureRecord(11, "埼玉県", "さいたまけん", "サイタマケン", "saitama"),
    PrefectureRecord(12, "千葉県", "ちばけん", "チバケン", "chiba"),
    PrefectureRecord(13, "東京都", "とうきょうと", "トウキョウト", "tokyo"),
    PrefectureRecord(14, "神奈川県", "かながわけん", "カナガワケン", "kanagawa"),
    PrefectureRecord(15, "新潟県", "にいがたけん", "ニイガタケン", "niigata"),
    PrefectureRecord(16, "富山県", "とやまけん", "トヤマケン", "toyama"),
    PrefectureRecord(17, "石川県", "いしかわけん", "イシカワケン", "ishikawa"),
    PrefectureRecord(18, "福井県", "ふくいけん", "フクイケン", "fukui"),
    PrefectureRecord(19, "山梨県", "やまなしけん", "ヤマナシケン", "yamanashi"),
    PrefectureRecord(20, "長野県", "ながのけん", "ナガノケン", "nagano"),
    PrefectureRecord(21, "岐阜県", "ぎふけん", "ギフケン", "gifu"),
    PrefectureRecord(22, "静岡県", "しずおかけん", "シズオカケン", "shizuoka"),
    PrefectureRecord(23, "愛知県", "あいちけん", "アイチケン", "aichi"),
    PrefectureRecord(24, "三重県", "みえけん", "ミエケン", "mie"),
    PrefectureRecord(25, "滋賀県", "しがけん", "シガケン", "shiga"),
    PrefectureRecord(26, "京都府", "きょうとふ", "キョウトフ", "kyoto"),
    PrefectureRecord(27, "大阪府", "おおさかふ", "オオサカフ", "osaka"),
    PrefectureRecord(28, "兵庫県", "ひょうごけん", "ヒョウゴケン", "hyogo"),
    PrefectureRecord(29, "奈良県", "ならけん", "ナラケン", "nara"),
    PrefectureRecord(30, "和歌山県", "わかやまけん", "ワカヤマケン", "wakayama"),
    PrefectureRecord(31, "鳥取県", "とっとりけん", "トットリケン", "tottori"),
    PrefectureRecord(32, "島根県", "しまねけん", "シマネケン", "shimane"),
    PrefectureRecord(33, "岡山県", "おかやまけん", "オカヤマケン", "okayama"),
    PrefectureRecord(34, "広島県", "ひろしまけん", "ヒロシマケン", "hiroshima"),
    PrefectureRecord(35, "山口県", "やまぐちけん", "ヤマグチケン", "yamaguchi"),
    PrefectureRecord(36, "徳島県", "とくしまけん", "トクシマケン", "tokushima"),
    PrefectureRecord(37, "香川県", "かがわけん", "カガワケン", "kagawa"),
    PrefectureRecord(38, "愛媛県", "えひめけん", "エヒメケン", "ehime"),
    PrefectureRecord(39, "高知県", "こうちけん", "コウチケン", "kochi"),
    PrefectureRecord(40, "福岡県", "ふくおかけん", "フクオカケン", "fukuoka"),
    PrefectureRecord(41, "佐賀県", "さがけん", "サガケン", "saga"),
    PrefectureRecord(42, "長崎県", "ながさきけん", "ナガサキケン", "nagasaki"),
    PrefectureRecord(43, "熊本県", "くまもとけん", "クマモトケン", "kumamoto"),
    PrefectureRecord(44, "大分県", "おおいたけん", "オオイタケン", "oita"),
    PrefectureRecord(45, "宮崎県", "みやざきけん", "ミヤザキケン", "miyazaki"),
    PrefectureRecord(46, "鹿児島県", "かごしまけん", "カゴシマケン", "kagoshima"),
    PrefectureRecord(47, "沖縄県", "おきなわけん", "オキナワケン", "okinawa"),
)

RECORDS_BY_CODE: Mapping[int, PrefectureRecord] = MappingProxyType(
    {record.code: record for record in PREFECTURE_RECORDS}
)
