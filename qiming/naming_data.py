# ═════════════════════════════════════════════════════════════════════════════════
# FIXED LOOKUP TABLES FOR NAME ANALYSIS
# ═════════════════════════════════════════════════════════════════════════════════
#
# Every rule the engines apply is driven by one of the tables below:
# 1. FIVE ELEMENTS: generation / control cycles
# 2. STEMS AND BRANCHES: sexagenary symbols, their elements, polarity and zodiac
# 3. NUMEROLOGY: the 81-number fortune table and the last-digit element map
# 4. PHONETICS: tone transitions, complex initials, homophone deny-lists, rhyme groups
# 5. MEANING: keyword sets and gendered character classes
#
# Tables are validated at import time and exposed read-only (MappingProxyType / frozenset).
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# ═════════════════════════════════════════════════════════════════════════════════
# FIVE ELEMENTS (五行)
# ═════════════════════════════════════════════════════════════════════════════════

FIVE_ELEMENTS = ("金", "木", "水", "火", "土")

ELEMENT_NAMES_EN = {
    "金": "Metal",
    "木": "Wood",
    "水": "Water",
    "火": "Fire",
    "土": "Earth",
}

# 相生: key generates value
ELEMENT_GENERATION = {
    "木": "火",  # wood feeds fire
    "火": "土",  # fire creates earth
    "土": "金",  # earth bears metal
    "金": "水",  # metal enriches water
    "水": "木",  # water nourishes wood
}

# 相克: key controls value
ELEMENT_CONTROL = {
    "木": "土",  # wood parts earth
    "土": "水",  # earth absorbs water
    "水": "火",  # water quenches fire
    "火": "金",  # fire melts metal
    "金": "木",  # metal chops wood
}

# ═════════════════════════════════════════════════════════════════════════════════
# HEAVENLY STEMS (天干) AND EARTHLY BRANCHES (地支)
# ═════════════════════════════════════════════════════════════════════════════════

HEAVENLY_STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")

STEM_ELEMENTS = {
    "甲": "木",
    "乙": "木",
    "丙": "火",
    "丁": "火",
    "戊": "土",
    "己": "土",
    "庚": "金",
    "辛": "金",
    "壬": "水",
    "癸": "水",
}

STEM_YIN_YANG = {
    "甲": "阳",
    "乙": "阴",
    "丙": "阳",
    "丁": "阴",
    "戊": "阳",
    "己": "阴",
    "庚": "阳",
    "辛": "阴",
    "壬": "阳",
    "癸": "阴",
}

EARTHLY_BRANCHES = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")

BRANCH_ELEMENTS = {
    "寅": "木",
    "卯": "木",
    "巳": "火",
    "午": "火",
    "申": "金",
    "酉": "金",
    "亥": "水",
    "子": "水",
    "辰": "土",
    "戌": "土",
    "丑": "土",
    "未": "土",
}

# Format: branch: (chinese_zodiac, english_zodiac)
BRANCH_ZODIAC = {
    "子": ("鼠", "Rat"),
    "丑": ("牛", "Ox"),
    "寅": ("虎", "Tiger"),
    "卯": ("兔", "Rabbit"),
    "辰": ("龙", "Dragon"),
    "巳": ("蛇", "Snake"),
    "午": ("马", "Horse"),
    "未": ("羊", "Goat"),
    "申": ("猴", "Monkey"),
    "酉": ("鸡", "Rooster"),
    "戌": ("狗", "Dog"),
    "亥": ("猪", "Pig"),
}

# ═════════════════════════════════════════════════════════════════════════════════
# 81 NUMEROLOGY (八十一数理)
# ═════════════════════════════════════════════════════════════════════════════════

FORTUNE_LEVELS = ("大吉", "吉", "半吉", "凶", "大凶")

# Format: number: (fortune_level, meaning)
NUMEROLOGY_81 = {
    1: ("大吉", "天地开泰，万物资始，繁荣富贵"),
    2: ("凶", "混沌未定，分离破败，动荡不安"),
    3: ("大吉", "立身处世，有贵人助，成功发达"),
    4: ("凶", "万事不成，破坏家运，孤苦伶仃"),
    5: ("大吉", "阴阳和合，生意兴隆，名利双收"),
    6: ("大吉", "天官赐福，德高望重，大有作为"),
    7: ("吉", "刚毅果断，勇往直前，排除万难"),
    8: ("吉", "意志刚健，勤勉发展，富于进取"),
    9: ("凶", "虽有才能，无奈遭难，有始无终"),
    10: ("凶", "乌云遮月，暗淡无光，空费心力"),
    11: ("大吉", "草木逢春，枝叶沾露，稳健着实"),
    12: ("凶", "薄弱无力，孤立无援，外祥内苦"),
    13: ("大吉", "天赋吉运，德望兼备，继续努力"),
    14: ("凶", "忍得苦难，必有后福，是成是败"),
    15: ("大吉", "谦恭做事，外得人和，大事成就"),
    16: ("大吉", "能获众望，成就大业，名利双收"),
    17: ("吉", "排除万难，有贵人助，把握时机"),
    18: ("大吉", "经商做事，顺利昌隆，如能慎始"),
    19: ("凶", "成功虽早，慎防亏空，内外不和"),
    20: ("凶", "智高志大，历尽艰难，焦心忧劳"),
    21: ("大吉", "先历困苦，后得幸福，霜雪梅花"),
    22: ("凶", "秋草逢霜，怀才不遇，忧愁怨苦"),
    23: ("大吉", "旭日东升，壮丽壮观，权威旺盛"),
    24: ("大吉", "锦绣前程，须靠自力，多用智谋"),
    25: ("吉", "天时地利，只欠人和，讲信修睦"),
    26: ("凶", "波澜起伏，千变万化，凌驾万难"),
    27: ("凶", "一成一败，一盛一衰，惟靠谨慎"),
    28: ("凶", "鱼临旱地，难逃厄运，此数大凶"),
    29: ("吉", "如龙得云，青云直上，智谋奋进"),
    30: ("半吉", "吉凶参半，得失相伴，投机取巧"),
    31: ("大吉", "此数大吉，名利双收，渐进向上"),
    32: ("大吉", "池中之龙，风云际会，一跃上天"),
    33: ("大吉", "意气用事，人和必失，如能慎始"),
    34: ("凶", "灾难不绝，难望成功，此数大凶"),
    35: ("吉", "中吉之数，进退保守，生意安稳"),
    36: ("凶", "波澜重叠，常陷穷困，动不如静"),
    37: ("大吉", "逢凶化吉，吉人天相，风调雨顺"),
    38: ("半吉", "名虽可得，利则难获，艺界发展"),
    39: ("大吉", "云开见月，虽有劳碌，光明坦途"),
    40: ("半吉", "一盛一衰，浮沉不定，知难而退"),
    41: ("大吉", "天赋吉运，德望兼备，继续努力"),
    42: ("凶", "事业不专，十九不成，专心不移"),
    43: ("凶", "雨夜之花，外祥内苦，忍耐自重"),
    44: ("凶", "虽用心计，事难遂愿，贪功好进"),
    45: ("大吉", "杨柳遇春，绿叶发枝，冲破难关"),
    46: ("凶", "坎坷不平，艰难重重，若无耐心"),
    47: ("大吉", "有贵人助，可成大业，虽遇不幸"),
    48: ("大吉", "美花丰实，鹤立鸡群，名利俱全"),
    49: ("凶", "吉凶互见，一成一败，凶中有吉"),
    50: ("半吉", "一盛一衰，浮沉不常，自重自处"),
    51: ("半吉", "盛衰参半，先吉后凶，先凶后吉"),
    52: ("大吉", "草木逢春，雨过天晴，渡过难关"),
    53: ("半吉", "盛衰参半，外祥内苦，先吉后凶"),
    54: ("凶", "虽倾全力，难望成功，此数大凶"),
    55: ("半吉", "外观隆昌，内隐祸患，克服难关"),
    56: ("凶", "事与愿违，终难成功，欲速不达"),
    57: ("吉", "努力经营，时来运转，旷野枯草"),
    58: ("半吉", "先苦后甜，先甜后苦，如能持之"),
    59: ("凶", "遇事犹豫，难望成事，大刀阔斧"),
    60: ("凶", "黑暗无光，心迷意乱，出尔反尔"),
    61: ("大吉", "云遮半月，内隐风波，应自谨慎"),
    62: ("凶", "烦闷懊恼，事事难展，自防灾祸"),
    63: ("大吉", "万物化育，繁荣之象，专心一意"),
    64: ("凶", "见异思迁，十九不成，徒劳无功"),
    65: ("大吉", "吉运自来，能享盛名，把握机会"),
    66: ("凶", "黑夜漫长，进退维谷，内外不和"),
    67: ("大吉", "天赋幸运，四通八达，家道繁昌"),
    68: ("大吉", "思虑周详，计划力行，不失先机"),
    69: ("凶", "动摇不安，常陷逆境，不得时运"),
    70: ("凶", "惨淡经营，难免贫困，此数不吉"),
    71: ("半吉", "吉凶参半，惟赖勇气，贯彻力行"),
    72: ("凶", "利害混集，凶多吉少，得而复失"),
    73: ("半吉", "安乐自来，自然吉祥，力行不懈"),
    74: ("凶", "利不及费，坐食山空，如无章法"),
    75: ("半吉", "吉中带凶，欲速不达，进不如守"),
    76: ("凶", "此数大凶，破产之象，宜速改名"),
    77: ("半吉", "先苦后甘，先甘后苦，如能守成"),
    78: ("半吉", "有得有失，华而不实，须防劫财"),
    79: ("凶", "如走夜路，前途无光，希望不大"),
    80: ("凶", "得而复失，枉费心机，守成无贪"),
    81: ("大吉", "最极之数，还本归元，能得繁荣"),
}

FORTUNE_DESCRIPTIONS = {
    "大吉": "大吉大利，功成名就，富贵荣华",
    "吉": "吉祥如意，顺风顺水，小有成就",
    "半吉": "吉凶参半，需谨慎行事，稳中求进",
    "凶": "运势不顺，多有坎坷，需要化解",
    "大凶": "大凶之数，灾祸连连，急需改名",
}

# Sancai element by the last digit of a grid number
LAST_DIGIT_ELEMENTS = {
    1: "木",
    2: "木",
    3: "火",
    4: "火",
    5: "土",
    6: "土",
    7: "金",
    8: "金",
    9: "水",
    0: "水",
}

SANCAI_INTERPRETATIONS = {
    "相生": "三才配置【{config}】为吉祥之象，天人地三才相生，运势顺畅，能得长辈提拔，下属拥戴，事业有成，家庭和睦。",
    "相克": "三才配置【{config}】存在相克，需要注意调和。虽有才能，但容易遭遇阻碍，需要加倍努力，注意身体健康和人际关系。",
    "同类": "三才配置【{config}】为平稳之象，运势平和，按部就班，稳中求进，适合踏实发展。",
}

# ═════════════════════════════════════════════════════════════════════════════════
# PHONETICS (音韵)
# ═════════════════════════════════════════════════════════════════════════════════

# Tone transitions of a two-character given name
TONE_PATTERNS_GOOD = frozenset(
    {
        (1, 2),
        (1, 3),
        (1, 4),
        (2, 1),
        (2, 3),
        (2, 4),
        (3, 1),
        (3, 2),
        (3, 4),
        (4, 1),
        (4, 2),
        (4, 3),
    }
)

TONE_PATTERNS_BAD = frozenset({(4, 4)})

COMPLEX_INITIALS = ("zh", "ch", "sh")

VERY_COMPLEX_SYLLABLES = frozenset({"zhuang", "chuang", "shuang", "niang", "jiang"})

# Single toneless syllables that sound like something unfortunate
PROBLEMATIC_SYLLABLES = {
    "shi": "死",
    "sha": "杀、傻",
    "gui": "鬼",
    "die": "跌、爹",
    "sang": "丧",
    "diao": "吊、屌",
    "mao": "冒、毛（某些组合）",
    "hu": "虎、糊（某些组合）",
}

# Two adjacent syllables read together
PROBLEMATIC_PAIRS = {
    "shabi": "傻逼",
    "caoni": "粗口用语",
    "wangba": "王八",
    "fangjian": "房间（某些语境）",
    "duliang": "肚量",
}

# Whole name read together
PROBLEMATIC_FULL_NAMES = {
    "wangcai": "旺财（宠物名）",
    "laiwang": "来旺（宠物名）",
    "dagou": "大狗",
}

# 平仄
TONE_CATEGORIES = {
    1: "平",
    2: "平",
    3: "仄",
    4: "仄",
}

# Longest first so "zh" wins over "z"
PINYIN_INITIALS = (
    "zh",
    "ch",
    "sh",
    "b",
    "p",
    "m",
    "f",
    "d",
    "t",
    "n",
    "l",
    "g",
    "k",
    "h",
    "j",
    "q",
    "x",
    "r",
    "z",
    "c",
    "s",
    "y",
    "w",
)

# 十三辙 rhyme groups; "v" stands for ü
RHYME_CATEGORIES = {
    "发花": ("a", "ia", "ua"),
    "梭波": ("o", "e", "uo"),
    "乜斜": ("ie", "ue", "ve"),
    "一七": ("i", "v", "er"),
    "姑苏": ("u",),
    "怀来": ("ai", "uai"),
    "灰堆": ("ei", "ui", "uei"),
    "遥条": ("ao", "iao"),
    "油求": ("ou", "iu", "iou"),
    "言前": ("an", "ian", "uan", "van"),
    "人辰": ("en", "in", "un", "vn"),
    "江阳": ("ang", "iang", "uang"),
    "中东": ("eng", "ing", "ong", "iong"),
}

# ═════════════════════════════════════════════════════════════════════════════════
# MEANING (字义)
# ═════════════════════════════════════════════════════════════════════════════════

POSITIVE_KEYWORDS = frozenset("吉祥福贵富康健美丽慧智文武德仁义礼信忠孝勇才华英俊秀雅清明亮辉春夏秋冬花草树林山水云天月星日光彩宝玉金")

NEGATIVE_KEYWORDS = frozenset("死亡病灾祸凶恶鬼魔妖贫穷衰败丑臭烂坏差")

FEMININE_CHARACTERS = frozenset(
    "嘉慧雅颖悦婷涵淑瑶琪萱欣怡诗梦思语晴澜美秀文静清柔婉琳瑜媛莉芳芸菲薇蕾荷莲梅兰竹菊桂芬月星云霞露霜雪冰玉珍珠琼娟娜娅婕娴嫣妍妮姗姣姿娇娥"
)

MASCULINE_CHARACTERS = frozenset("杰强伟刚磊浩宇轩博涛鹏志俊文华明宏毅豪雄勇威武坚健力锋昊天宸辰晨阳煜炎烈焕耀曜晖辉")

FEMININE_RADICALS = frozenset("女艹氵玉王月")

MASCULINE_RADICALS = frozenset("力山火日")

# ═════════════════════════════════════════════════════════════════════════════════
# SURNAMES (百家姓)
# ═════════════════════════════════════════════════════════════════════════════════

TOP_100_SURNAMES = tuple(
    "王李张刘陈杨黄赵周吴徐孙马朱胡郭何林高罗郑梁谢宋唐许邓韩冯曹彭曾肖田董袁潘于蒋蔡余杜叶程苏魏吕丁任沈姚卢姜崔钟谭陆汪"
    "范金石廖贾夏韦付方白邹孟熊秦邱江尹薛闫段雷侯龙史陶黎贺顾毛郝龚邵万钱严覃武戴莫孔向常"
)

# ═════════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═════════════════════════════════════════════════════════════════════════════════


def _assert_covers(table_name, table, expected_keys):
    """Validate that a lookup table has exactly one entry per expected key."""
    missing = set(expected_keys) - set(table)
    extra = set(table) - set(expected_keys)
    if missing or extra:
        raise ValueError(f"{table_name} does not cover its domain: missing={missing or '{}'} extra={extra or '{}'}")


def _assert_values_within(table_name, table, allowed_values):
    """Validate that every value of a lookup table is drawn from an allowed set."""
    bad = {key: value for key, value in table.items() if value not in allowed_values}
    if bad:
        raise ValueError(f"{table_name} has values outside {allowed_values}: {bad}")


def _assert_cycle(table_name, table):
    """Validate that an element relation is a single five-step cycle."""
    seen = []
    current = FIVE_ELEMENTS[0]
    for _ in FIVE_ELEMENTS:
        seen.append(current)
        current = table[current]
    if current != FIVE_ELEMENTS[0] or len(set(seen)) != len(FIVE_ELEMENTS):
        raise ValueError(f"{table_name} is not a single cycle over the five elements: {seen}")


def _check_numerology_table():
    """Every number 1..81 present, every level known, every meaning non-empty."""
    _assert_covers("NUMEROLOGY_81", NUMEROLOGY_81, range(1, 82))
    for number, (fortune, meaning) in NUMEROLOGY_81.items():
        if fortune not in FORTUNE_LEVELS:
            raise ValueError(f"NUMEROLOGY_81[{number}] has unknown fortune level: {fortune}")
        if not meaning:
            raise ValueError(f"NUMEROLOGY_81[{number}] has an empty meaning")


_assert_covers("ELEMENT_NAMES_EN", ELEMENT_NAMES_EN, FIVE_ELEMENTS)
_assert_covers("ELEMENT_GENERATION", ELEMENT_GENERATION, FIVE_ELEMENTS)
_assert_covers("ELEMENT_CONTROL", ELEMENT_CONTROL, FIVE_ELEMENTS)
_assert_cycle("ELEMENT_GENERATION", ELEMENT_GENERATION)
_assert_cycle("ELEMENT_CONTROL", ELEMENT_CONTROL)

_assert_covers("STEM_ELEMENTS", STEM_ELEMENTS, HEAVENLY_STEMS)
_assert_covers("STEM_YIN_YANG", STEM_YIN_YANG, HEAVENLY_STEMS)
_assert_values_within("STEM_ELEMENTS", STEM_ELEMENTS, FIVE_ELEMENTS)
_assert_covers("BRANCH_ELEMENTS", BRANCH_ELEMENTS, EARTHLY_BRANCHES)
_assert_covers("BRANCH_ZODIAC", BRANCH_ZODIAC, EARTHLY_BRANCHES)
_assert_values_within("BRANCH_ELEMENTS", BRANCH_ELEMENTS, FIVE_ELEMENTS)

_check_numerology_table()
_assert_covers("FORTUNE_DESCRIPTIONS", FORTUNE_DESCRIPTIONS, FORTUNE_LEVELS)
_assert_covers("LAST_DIGIT_ELEMENTS", LAST_DIGIT_ELEMENTS, range(10))
_assert_values_within("LAST_DIGIT_ELEMENTS", LAST_DIGIT_ELEMENTS, FIVE_ELEMENTS)

if TONE_PATTERNS_GOOD & TONE_PATTERNS_BAD:
    raise ValueError(f"Tone patterns both allowed and denied: {TONE_PATTERNS_GOOD & TONE_PATTERNS_BAD}")

if len(TOP_100_SURNAMES) != 100 or len(set(TOP_100_SURNAMES)) != 100:
    raise ValueError(f"TOP_100_SURNAMES must hold 100 distinct surnames, got {len(set(TOP_100_SURNAMES))}")


# Create immutable versions

ELEMENT_NAMES_EN = MappingProxyType(ELEMENT_NAMES_EN)
ELEMENT_GENERATION = MappingProxyType(ELEMENT_GENERATION)
ELEMENT_CONTROL = MappingProxyType(ELEMENT_CONTROL)
STEM_ELEMENTS = MappingProxyType(STEM_ELEMENTS)
STEM_YIN_YANG = MappingProxyType(STEM_YIN_YANG)
BRANCH_ELEMENTS = MappingProxyType(BRANCH_ELEMENTS)
BRANCH_ZODIAC = MappingProxyType(BRANCH_ZODIAC)
NUMEROLOGY_81 = MappingProxyType(NUMEROLOGY_81)
FORTUNE_DESCRIPTIONS = MappingProxyType(FORTUNE_DESCRIPTIONS)
LAST_DIGIT_ELEMENTS = MappingProxyType(LAST_DIGIT_ELEMENTS)
SANCAI_INTERPRETATIONS = MappingProxyType(SANCAI_INTERPRETATIONS)
PROBLEMATIC_SYLLABLES = MappingProxyType(PROBLEMATIC_SYLLABLES)
PROBLEMATIC_PAIRS = MappingProxyType(PROBLEMATIC_PAIRS)
PROBLEMATIC_FULL_NAMES = MappingProxyType(PROBLEMATIC_FULL_NAMES)
TONE_CATEGORIES = MappingProxyType(TONE_CATEGORIES)
RHYME_CATEGORIES = MappingProxyType(RHYME_CATEGORIES)

# Element control read the other way round: value is controlled by key
ELEMENT_CONTROLLED_BY = MappingProxyType({target: source for source, target in ELEMENT_CONTROL.items()})
ELEMENT_GENERATED_BY = MappingProxyType({target: source for source, target in ELEMENT_GENERATION.items()})
