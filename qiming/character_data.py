"""
Static character pool.

GIVEN_NAME_ROWS are the candidates for given names. Columns:
(symbol, pinyin, tone, simplified strokes, Kangxi strokes, radical, element, meaning, frequency rank, HSK level)

SURNAME_ROWS only carry what stroke and romanization lookups need. Characters present in both tables
keep their given-name row.
"""

GIVEN_NAME_ROWS = (
    # ── 金 ──
    ("鑫", "xīn", 1, 24, 24, "金", "金", "财富兴盛、多金", 3500, None),
    ("锦", "jǐn", 3, 13, 16, "钅", "金", "锦绣、华美、前程似锦", 1800, 6),
    ("铭", "míng", 2, 11, 14, "钅", "金", "铭记、铭刻、铭志", 2200, 6),
    ("钰", "yù", 4, 10, 13, "钅", "金", "珍宝、坚金", 4200, None),
    ("瑞", "ruì", 4, 13, 14, "王", "金", "吉祥、祥瑞", 1600, 6),
    ("诗", "shī", 1, 8, 13, "讠", "金", "诗歌、诗意、文采", 700, 4),
    ("思", "sī", 1, 9, 9, "心", "金", "思考、思念、智慧", 300, 3),
    ("书", "shū", 1, 4, 10, "乙", "金", "书籍、学识、文雅", 250, 1),
    ("静", "jìng", 4, 14, 16, "青", "金", "安静、文静、清雅", 600, 3),
    ("心", "xīn", 1, 4, 4, "心", "金", "心灵、真心、心意", 150, 1),
    ("刚", "gāng", 1, 6, 10, "刂", "金", "刚强、坚毅", 1100, 5),
    ("锋", "fēng", 1, 12, 15, "钅", "金", "锋芒、锐利、进取", 2500, 6),
    ("钧", "jūn", 1, 9, 12, "钅", "金", "千钧、重量、尊贵", 4000, None),
    ("铮", "zhēng", 1, 11, 14, "钅", "金", "铮铮铁骨、刚正", 4500, None),
    ("珊", "shān", 1, 9, 10, "王", "金", "珊瑚、美玉", 3200, None),
    ("姗", "shān", 1, 8, 8, "女", "金", "姗姗、步态优美", 4300, None),
    ("舒", "shū", 1, 12, 12, "舌", "金", "舒展、舒适、从容", 1300, 4),
    ("素", "sù", 4, 10, 10, "糸", "金", "朴素、纯洁、本色", 1200, 5),
    ("秀", "xiù", 4, 7, 7, "禾", "金", "秀丽、优秀、清秀", 900, 5),
    ("诚", "chéng", 2, 8, 14, "讠", "金", "诚实、真诚、守信", 800, 4),
    ("义", "yì", 4, 3, 13, "丶", "金", "仁义、正义、道义", 500, 5),
    ("晟", "shèng", 4, 10, 11, "日", "金", "光明、兴盛", 4100, None),
    ("才", "cái", 2, 3, 4, "扌", "金", "才华、才能", 400, 2),
    ("聪", "cōng", 1, 15, 17, "耳", "金", "聪明、聪慧", 1900, 5),
    ("悦", "yuè", 4, 10, 11, "忄", "金", "喜悦、愉快", 1700, 5),
    ("睿", "ruì", 4, 14, 14, "目", "金", "睿智、通达、明智", 3300, None),
    ("瑜", "yú", 2, 13, 14, "王", "金", "美玉、光彩", 3700, None),
    ("星", "xīng", 1, 9, 9, "日", "金", "星辰、光明、希望", 800, 2),
    ("仁", "rén", 2, 4, 4, "亻", "金", "仁爱、仁义、仁慈", 2000, 6),
    ("信", "xìn", 4, 9, 9, "亻", "金", "诚信、信义、信任", 300, 2),
    ("成", "chéng", 2, 6, 7, "戈", "金", "成功、成就、成熟", 80, 2),
    ("情", "qíng", 2, 11, 12, "忄", "金", "情谊、深情、情意", 500, 3),
    ("秋", "qiū", 1, 9, 9, "禾", "金", "秋天、丰收、成熟", 700, 3),
    ("实", "shí", 2, 8, 14, "宀", "金", "诚实、实在、果实", 150, 2),
    ("婵", "chán", 2, 11, 15, "女", "金", "婵娟、美好", 4900, None),
    ("修", "xiū", 1, 9, 10, "亻", "金", "修养、修身、美好", 900, 4),
    ("正", "zhèng", 4, 5, 5, "止", "金", "正直、端正、正气", 120, 2),
    ("舟", "zhōu", 1, 6, 6, "舟", "金", "轻舟、渡舟", 3100, None),
    ("顺", "shùn", 4, 9, 12, "页", "金", "顺利、和顺", 900, 4),
    # ── 木 ──
    ("林", "lín", 2, 8, 8, "木", "木", "树林、森林、繁茂", 500, 4),
    ("森", "sēn", 1, 12, 12, "木", "木", "森林、繁盛、众多", 1700, 5),
    ("杰", "jié", 2, 8, 12, "木", "木", "杰出、英杰、才能出众", 1200, 5),
    ("楠", "nán", 2, 13, 13, "木", "木", "楠木、坚实、珍贵", 3600, None),
    ("柏", "bǎi", 3, 9, 9, "木", "木", "松柏、坚贞、长青", 2300, None),
    ("松", "sōng", 1, 8, 8, "木", "木", "松树、坚韧、长寿", 1300, 5),
    ("桐", "tóng", 2, 10, 10, "木", "木", "梧桐、高洁", 3300, None),
    ("梓", "zǐ", 3, 11, 11, "木", "木", "梓木、故乡、栋梁", 3900, None),
    ("芳", "fāng", 1, 7, 10, "艹", "木", "芳香、美好、品德", 1100, 5),
    ("芷", "zhǐ", 3, 7, 10, "艹", "木", "香草、高洁", 4600, None),
    ("若", "ruò", 4, 8, 11, "艹", "木", "杜若、香草、若水", 600, 4),
    ("茜", "qiàn", 4, 9, 12, "艹", "木", "茜草、鲜红、明丽", 3700, None),
    ("萱", "xuān", 1, 12, 15, "艹", "木", "萱草、忘忧、母爱", 3400, None),
    ("蓉", "róng", 2, 13, 16, "艹", "木", "芙蓉、出水芙蓉、美丽", 2900, None),
    ("芙", "fú", 2, 7, 10, "艹", "木", "芙蓉、荷花、清丽", 3800, None),
    ("荣", "róng", 2, 9, 14, "艹", "木", "繁荣、光荣、荣耀", 900, 5),
    ("英", "yīng", 1, 8, 11, "艹", "木", "英才、花朵、英俊", 700, 4),
    ("菲", "fēi", 1, 11, 14, "艹", "木", "芳菲、花草、美丽", 2600, None),
    ("桃", "táo", 2, 10, 10, "木", "木", "桃花、美好", 2000, 5),
    ("柳", "liǔ", 3, 9, 9, "木", "木", "杨柳、柔美、依依", 2100, None),
    ("春", "chūn", 1, 9, 9, "日", "木", "春天、生机、希望", 400, 2),
    ("欣", "xīn", 1, 8, 8, "欠", "木", "欣喜、欣荣、快乐", 1400, 5),
    ("建", "jiàn", 4, 8, 9, "廴", "木", "建立、建设、有为", 300, 3),
    ("东", "dōng", 1, 5, 8, "一", "木", "东方、朝阳、生机", 200, 1),
    ("柔", "róu", 2, 9, 9, "木", "木", "温柔、柔和", 1600, 5),
    ("楚", "chǔ", 3, 13, 13, "木", "木", "清楚、楚楚动人", 1700, 5),
    ("彬", "bīn", 1, 11, 11, "彡", "木", "文质彬彬、文雅", 3100, None),
    ("荷", "hé", 2, 10, 13, "艹", "木", "荷花、清廉、高洁", 2400, 6),
    ("兰", "lán", 2, 5, 23, "八", "木", "兰花、高雅、芬芳", 1900, 6),
    ("蕙", "huì", 4, 15, 18, "艹", "木", "蕙兰、香草、贤淑", 4400, None),
    ("竹", "zhú", 2, 6, 6, "竹", "木", "竹子、正直、有节", 1800, 5),
    ("嘉", "jiā", 1, 14, 14, "口", "木", "嘉美、嘉奖、美好", 1600, 6),
    ("宜", "yí", 2, 8, 8, "宀", "木", "适宜、和顺、美好", 1000, 4),
    ("雅", "yǎ", 3, 12, 12, "隹", "木", "文雅、高雅、雅致", 900, 5),
    ("菁", "jīng", 1, 11, 14, "艹", "木", "菁华、精华、茂盛", 4300, None),
    ("薇", "wēi", 1, 16, 19, "艹", "木", "蔷薇、紫薇、美丽", 3000, None),
    ("启", "qǐ", 3, 7, 11, "户", "木", "启迪、开创", 1000, 5),
    ("凯", "kǎi", 3, 8, 12, "几", "木", "凯旋、胜利、欢乐", 1500, 6),
    ("佳", "jiā", 1, 8, 8, "亻", "木", "佳美、优秀、美好", 1100, 4),
    ("梦", "mèng", 4, 11, 14, "夕", "木", "梦想、理想", 700, 4),
    ("琳", "lín", 2, 12, 13, "王", "木", "美玉、珍贵", 2900, None),
    ("颖", "yǐng", 3, 13, 16, "页", "木", "聪颖、才能出众", 2300, None),
    ("玉", "yù", 4, 5, 5, "玉", "木", "美玉、珍贵、纯洁", 1100, 5),
    ("琪", "qí", 2, 12, 13, "王", "木", "美玉、珍奇", 3900, None),
    ("月", "yuè", 4, 4, 4, "月", "木", "明月、皎洁", 300, 1),
    ("功", "gōng", 1, 5, 5, "力", "木", "功业、功绩、成就", 700, 4),
    ("颜", "yán", 2, 15, 18, "页", "木", "容颜、颜色", 1600, 6),
    ("青", "qīng", 1, 8, 8, "青", "木", "青春、青翠、生机", 800, 3),
    ("久", "jiǔ", 3, 3, 3, "丿", "木", "长久、永久", 1000, 4),
    ("娟", "juān", 1, 10, 10, "女", "木", "秀美、娟秀", 3300, None),
    ("琼", "qióng", 2, 12, 20, "王", "木", "琼玉、美好", 3300, None),
    ("高", "gāo", 1, 10, 10, "高", "木", "高尚、高远", 100, 1),
    ("茂", "mào", 4, 8, 11, "艹", "木", "茂盛、繁茂", 2100, 6),
    ("宽", "kuān", 1, 10, 15, "宀", "木", "宽厚、宽容", 1200, 4),
    # ── 水 ──
    ("华", "huá", 2, 6, 14, "十", "水", "华丽、华美、繁荣、才华", 300, 2),
    ("文", "wén", 2, 4, 4, "文", "水", "文采、文雅、文化", 150, 1),
    ("博", "bó", 2, 12, 12, "十", "水", "博学、广博、渊博", 1300, 4),
    ("浩", "hào", 4, 10, 11, "氵", "水", "浩大、浩瀚、广阔", 1800, 6),
    ("涵", "hán", 2, 11, 12, "氵", "水", "涵养、包容、内涵", 2700, 6),
    ("泽", "zé", 2, 8, 17, "氵", "水", "恩泽、润泽、福泽", 1400, 6),
    ("海", "hǎi", 3, 10, 11, "氵", "水", "大海、宽广、包容", 350, 2),
    ("江", "jiāng", 1, 6, 7, "氵", "水", "江河、宽广、奔流", 500, 3),
    ("清", "qīng", 1, 11, 12, "氵", "水", "清澈、清白、清雅", 300, 3),
    ("洁", "jié", 2, 9, 16, "氵", "水", "纯洁、洁净、高洁", 1300, 5),
    ("涛", "tāo", 1, 10, 18, "氵", "水", "波涛、气势、壮阔", 2200, None),
    ("源", "yuán", 2, 13, 14, "氵", "水", "源泉、根源、流长", 700, 5),
    ("淑", "shū", 1, 11, 12, "氵", "水", "贤淑、善良、美好", 3000, None),
    ("沐", "mù", 4, 7, 8, "氵", "水", "沐浴、恩泽", 3600, None),
    ("润", "rùn", 4, 10, 16, "氵", "水", "滋润、温润、润泽", 1900, 6),
    ("雨", "yǔ", 3, 8, 8, "雨", "水", "雨露、滋润、生机", 600, 1),
    ("雪", "xuě", 3, 11, 11, "雨", "水", "白雪、纯洁", 900, 2),
    ("冰", "bīng", 1, 6, 6, "冫", "水", "冰清玉洁、纯洁", 1100, 3),
    ("溪", "xī", 1, 13, 14, "氵", "水", "溪流、清澈", 2600, None),
    ("鸿", "hóng", 2, 11, 17, "鸟", "水", "鸿鹄、远大志向", 2500, None),
    ("瀚", "hàn", 4, 19, 20, "氵", "水", "浩瀚、广大", 4700, None),
    ("航", "háng", 2, 10, 10, "舟", "水", "航行、远航、前程", 1400, 4),
    ("冬", "dōng", 1, 5, 5, "冫", "水", "冬天、沉静", 1000, 3),
    ("渊", "yuān", 1, 11, 12, "氵", "水", "渊博、深厚", 3500, None),
    ("汐", "xī", 1, 6, 7, "氵", "水", "潮汐、灵动", 4800, None),
    ("沁", "qìn", 4, 7, 8, "氵", "水", "沁人心脾、芬芳", 4200, None),
    ("露", "lù", 4, 21, 21, "雨", "水", "雨露、清新", 1600, 6),
    ("妙", "miào", 4, 7, 7, "女", "水", "美妙、奇妙", 1500, 5),
    ("敏", "mǐn", 3, 11, 11, "攵", "水", "聪敏、敏捷", 1500, 5),
    ("宏", "hóng", 2, 7, 7, "宀", "水", "宏大、宏伟、远大", 1900, 6),
    ("慧", "huì", 4, 15, 15, "心", "水", "智慧、聪慧、慧心", 1500, 5),
    ("云", "yún", 2, 4, 12, "二", "水", "白云、自在、高远", 800, 3),
    ("风", "fēng", 1, 4, 9, "风", "水", "风度、风采、风雅", 400, 2),
    ("和", "hé", 2, 8, 8, "口", "水", "和平、和谐、和顺", 60, 1),
    ("鹏", "péng", 2, 13, 19, "鸟", "水", "大鹏、鹏程万里、远大", 2400, None),
    ("温", "wēn", 1, 12, 14, "氵", "水", "温和、温暖、温文", 1100, 3),
    ("鸣", "míng", 2, 8, 14, "鸟", "水", "鸣响、一鸣惊人", 2000, 6),
    ("望", "wàng", 4, 11, 11, "月", "水", "希望、声望、名望", 500, 4),
    ("学", "xué", 2, 8, 16, "子", "水", "学识、学问、博学", 90, 1),
    ("融", "róng", 2, 16, 16, "虫", "水", "融合、和乐", 1400, 5),
    # ── 火 ──
    ("明", "míng", 2, 8, 8, "日", "火", "光明、明亮、吉祥", 200, 1),
    ("晨", "chén", 2, 11, 11, "日", "火", "清晨、朝气、希望", 1800, 5),
    ("辉", "huī", 1, 12, 15, "光", "火", "光辉、辉煌", 1500, 5),
    ("煜", "yù", 4, 13, 13, "火", "火", "照耀、光明", 4500, None),
    ("炎", "yán", 2, 8, 8, "火", "火", "炎热、光明、热烈", 2300, 6),
    ("烨", "yè", 4, 10, 16, "火", "火", "光辉灿烂", 4600, None),
    ("灿", "càn", 4, 7, 17, "火", "火", "灿烂、光彩", 2400, 6),
    ("昊", "hào", 4, 8, 8, "日", "火", "广阔天空、元气博大", 4100, None),
    ("晓", "xiǎo", 3, 10, 16, "日", "火", "拂晓、明白、知晓", 1300, 5),
    ("昕", "xīn", 1, 8, 8, "日", "火", "黎明、光明", 4400, None),
    ("晴", "qíng", 2, 12, 12, "日", "火", "晴朗、明朗", 1700, 2),
    ("彤", "tóng", 2, 7, 7, "彡", "火", "红色、红彤彤、热烈", 3700, None),
    ("丹", "dān", 1, 4, 4, "丶", "火", "红色、赤诚、丹心", 1700, 6),
    ("婷", "tíng", 2, 12, 12, "女", "火", "婷婷玉立、美好", 2800, None),
    ("志", "zhì", 4, 7, 7, "心", "火", "志向、理想、意志", 700, 4),
    ("俊", "jùn", 4, 9, 9, "亻", "火", "英俊、才智出众", 1900, 6),
    ("哲", "zhé", 2, 10, 10, "口", "火", "哲理、智慧、明智", 1900, 6),
    ("智", "zhì", 4, 12, 12, "日", "火", "智慧、聪明、明智", 800, 5),
    ("旭", "xù", 4, 6, 6, "日", "火", "旭日、朝气", 3300, None),
    ("曦", "xī", 1, 20, 20, "日", "火", "晨曦、阳光", 4800, None),
    ("灵", "líng", 2, 7, 24, "火", "火", "灵秀、聪慧、灵气", 900, 5),
    ("丽", "lì", 4, 7, 19, "一", "火", "美丽、秀丽、华丽", 1000, 4),
    ("乐", "lè", 4, 5, 15, "丿", "火", "快乐、欢乐、音乐", 250, 2),
    ("南", "nán", 2, 9, 9, "十", "火", "南方、温暖", 400, 2),
    ("昭", "zhāo", 1, 9, 9, "日", "火", "昭明、光明、显著", 3500, None),
    ("熙", "xī", 1, 14, 14, "灬", "火", "光明、兴盛、和乐", 3800, None),
    ("瑶", "yáo", 2, 14, 15, "王", "火", "美玉、珍贵", 3100, None),
    ("耀", "yào", 4, 20, 20, "羽", "火", "照耀、荣耀", 2000, 6),
    ("龙", "lóng", 2, 5, 16, "龙", "火", "龙腾、尊贵、吉祥", 800, 4),
    ("天", "tiān", 1, 4, 4, "大", "火", "天空、广阔、自然", 100, 1),
    ("德", "dé", 2, 15, 15, "彳", "火", "品德、德行、厚德", 600, 5),
    ("礼", "lǐ", 3, 5, 18, "礻", "火", "礼仪、礼貌、谦和", 1000, 3),
    ("程", "chéng", 2, 12, 12, "禾", "火", "前程、规程、进程", 900, 4),
    ("光", "guāng", 1, 6, 6, "儿", "火", "光明、光彩、光辉", 250, 2),
    ("端", "duān", 1, 14, 14, "立", "火", "端庄、端正", 1300, 5),
    ("立", "lì", 4, 5, 5, "立", "火", "自立、建立", 300, 3),
    ("晖", "huī", 1, 10, 13, "日", "火", "春晖、光辉", 4000, None),
    # ── 土 ──
    ("伟", "wěi", 3, 6, 11, "亻", "土", "伟大、宏伟", 150, 4),
    ("宇", "yǔ", 3, 6, 6, "宀", "土", "宇宙、气宇轩昂", 1500, 6),
    ("安", "ān", 1, 6, 6, "宀", "土", "平安、安宁、安康", 250, 1),
    ("坤", "kūn", 1, 8, 8, "土", "土", "大地、厚德", 3800, None),
    ("培", "péi", 2, 11, 11, "土", "土", "培育、培养", 1200, 5),
    ("均", "jūn", 1, 7, 7, "土", "土", "均衡、平均、公正", 1300, 4),
    ("圣", "shèng", 4, 5, 13, "土", "土", "圣明、崇高", 1800, 6),
    ("岳", "yuè", 4, 8, 8, "山", "土", "山岳、高大、稳重", 2600, None),
    ("峰", "fēng", 1, 10, 10, "山", "土", "山峰、高峰、卓越", 1500, 5),
    ("磊", "lěi", 3, 15, 15, "石", "土", "磊落、光明磊落、坦荡", 3400, None),
    ("山", "shān", 1, 3, 3, "山", "土", "高山、稳重", 300, 1),
    ("毅", "yì", 4, 15, 15, "殳", "土", "坚毅、毅力、果断", 2200, 6),
    ("远", "yuǎn", 3, 7, 17, "辶", "土", "远大、远见、长远", 350, 2),
    ("怡", "yí", 2, 8, 9, "忄", "土", "怡然、快乐、和悦", 3200, None),
    ("阳", "yáng", 2, 6, 17, "阝", "土", "阳光、光明、朝气", 600, 3),
    ("城", "chéng", 2, 9, 10, "土", "土", "城池、坚固", 350, 3),
    ("坚", "jiān", 1, 7, 11, "土", "土", "坚强、坚定", 1000, 5),
    ("轩", "xuān", 1, 7, 10, "车", "土", "气宇轩昂、高远", 3000, None),
    ("佑", "yòu", 4, 7, 7, "亻", "土", "保佑、庇护、吉祥", 3200, None),
    ("岚", "lán", 2, 7, 12, "山", "土", "山间雾气、灵秀", 4200, None),
    ("允", "yǔn", 3, 4, 4, "儿", "土", "允诺、公允、诚信", 2500, 6),
    ("辰", "chén", 2, 7, 7, "辰", "土", "星辰、时光", 2800, None),
    ("恩", "ēn", 1, 10, 10, "心", "土", "恩泽、感恩、恩惠", 1300, 5),
    ("永", "yǒng", 3, 5, 5, "水", "土", "永久、长远", 900, 4),
    ("依", "yī", 1, 8, 8, "亻", "土", "依依、依靠", 700, 4),
)

# (symbol, pinyin, tone, simplified strokes, Kangxi strokes, radical, element)
SURNAME_ROWS = (
    ("王", "wáng", 2, 4, 4, "王", "土"),
    ("李", "lǐ", 3, 7, 7, "木", "木"),
    ("张", "zhāng", 1, 7, 11, "弓", "火"),
    ("刘", "liú", 2, 6, 15, "刂", "金"),
    ("陈", "chén", 2, 7, 16, "阝", "火"),
    ("杨", "yáng", 2, 7, 13, "木", "木"),
    ("黄", "huáng", 2, 11, 12, "黄", "土"),
    ("赵", "zhào", 4, 9, 14, "走", "火"),
    ("周", "zhōu", 1, 8, 8, "口", "金"),
    ("吴", "wú", 2, 7, 7, "口", "木"),
    ("徐", "xú", 2, 10, 10, "彳", "金"),
    ("孙", "sūn", 1, 6, 10, "子", "水"),
    ("马", "mǎ", 3, 3, 10, "马", "火"),
    ("朱", "zhū", 1, 6, 6, "木", "木"),
    ("胡", "hú", 2, 9, 11, "月", "土"),
    ("郭", "guō", 1, 10, 15, "阝", "木"),
    ("何", "hé", 2, 7, 7, "亻", "水"),
    ("林", "lín", 2, 8, 8, "木", "木"),
    ("高", "gāo", 1, 10, 10, "高", "木"),
    ("罗", "luó", 2, 8, 20, "罒", "火"),
    ("郑", "zhèng", 4, 8, 19, "阝", "火"),
    ("梁", "liáng", 2, 11, 11, "木", "木"),
    ("谢", "xiè", 4, 12, 17, "讠", "金"),
    ("宋", "sòng", 4, 7, 7, "宀", "金"),
    ("唐", "táng", 2, 10, 10, "广", "火"),
    ("许", "xǔ", 3, 6, 11, "讠", "木"),
    ("邓", "dèng", 4, 4, 19, "阝", "火"),
    ("韩", "hán", 2, 12, 17, "韦", "水"),
    ("冯", "féng", 2, 5, 12, "冫", "水"),
    ("曹", "cáo", 2, 11, 11, "曰", "金"),
    ("彭", "péng", 2, 12, 12, "彡", "水"),
    ("曾", "zēng", 1, 12, 12, "曰", "金"),
    ("肖", "xiāo", 1, 7, 7, "月", "金"),
    ("田", "tián", 2, 5, 5, "田", "火"),
    ("董", "dǒng", 3, 12, 15, "艹", "木"),
    ("袁", "yuán", 2, 10, 10, "衣", "土"),
    ("潘", "pān", 1, 15, 16, "氵", "水"),
    ("于", "yú", 2, 3, 3, "二", "土"),
    ("蒋", "jiǎng", 3, 12, 17, "艹", "木"),
    ("蔡", "cài", 4, 14, 17, "艹", "木"),
    ("余", "yú", 2, 7, 7, "人", "土"),
    ("杜", "dù", 4, 7, 7, "木", "木"),
    ("叶", "yè", 4, 5, 15, "口", "土"),
    ("程", "chéng", 2, 12, 12, "禾", "火"),
    ("苏", "sū", 1, 7, 22, "艹", "木"),
    ("魏", "wèi", 4, 17, 18, "鬼", "木"),
    ("吕", "lǚ", 3, 6, 7, "口", "火"),
    ("丁", "dīng", 1, 2, 2, "一", "火"),
    ("任", "rén", 2, 6, 6, "亻", "金"),
    ("沈", "shěn", 3, 7, 8, "氵", "水"),
    ("姚", "yáo", 2, 9, 9, "女", "土"),
    ("卢", "lú", 2, 5, 16, "卜", "火"),
    ("姜", "jiāng", 1, 9, 9, "女", "木"),
    ("崔", "cuī", 1, 11, 11, "山", "土"),
    ("钟", "zhōng", 1, 9, 17, "钅", "金"),
    ("谭", "tán", 2, 14, 19, "讠", "火"),
    ("陆", "lù", 4, 7, 16, "阝", "火"),
    ("汪", "wāng", 1, 7, 8, "氵", "水"),
    ("范", "fàn", 4, 8, 15, "艹", "水"),
    ("金", "jīn", 1, 8, 8, "金", "金"),
    ("石", "shí", 2, 5, 5, "石", "金"),
    ("廖", "liào", 4, 14, 14, "广", "火"),
    ("贾", "jiǎ", 3, 10, 13, "贝", "木"),
    ("夏", "xià", 4, 10, 10, "夂", "火"),
    ("韦", "wéi", 2, 4, 9, "韦", "土"),
    ("付", "fù", 4, 5, 5, "亻", "火"),
    ("方", "fāng", 1, 4, 4, "方", "水"),
    ("白", "bái", 2, 5, 5, "白", "金"),
    ("邹", "zōu", 1, 7, 17, "阝", "金"),
    ("孟", "mèng", 4, 8, 8, "子", "水"),
    ("熊", "xióng", 2, 14, 14, "灬", "水"),
    ("秦", "qín", 2, 10, 10, "禾", "金"),
    ("邱", "qiū", 1, 7, 12, "阝", "木"),
    ("江", "jiāng", 1, 6, 7, "氵", "水"),
    ("尹", "yǐn", 3, 4, 4, "尸", "土"),
    ("薛", "xuē", 1, 16, 19, "艹", "木"),
    ("闫", "yán", 2, 6, 11, "门", "木"),
    ("段", "duàn", 4, 9, 9, "殳", "火"),
    ("雷", "léi", 2, 13, 13, "雨", "水"),
    ("侯", "hóu", 2, 9, 9, "亻", "水"),
    ("龙", "lóng", 2, 5, 16, "龙", "火"),
    ("史", "shǐ", 3, 5, 5, "口", "金"),
    ("陶", "táo", 2, 10, 16, "阝", "火"),
    ("黎", "lí", 2, 15, 15, "黍", "火"),
    ("贺", "hè", 4, 9, 12, "贝", "水"),
    ("顾", "gù", 4, 10, 21, "页", "木"),
    ("毛", "máo", 2, 4, 4, "毛", "水"),
    ("郝", "hǎo", 3, 9, 14, "阝", "水"),
    ("龚", "gōng", 1, 11, 22, "龙", "木"),
    ("邵", "shào", 4, 7, 12, "阝", "金"),
    ("万", "wàn", 4, 3, 15, "一", "水"),
    ("钱", "qián", 2, 10, 16, "钅", "金"),
    ("严", "yán", 2, 7, 20, "一", "木"),
    ("覃", "qín", 2, 12, 12, "襾", "金"),
    ("武", "wǔ", 3, 8, 8, "止", "水"),
    ("戴", "dài", 4, 17, 18, "戈", "火"),
    ("莫", "mò", 4, 10, 13, "艹", "水"),
    ("孔", "kǒng", 3, 4, 4, "子", "木"),
    ("向", "xiàng", 4, 6, 6, "口", "水"),
    ("常", "cháng", 2, 11, 11, "巾", "金"),
    # Compound surnames
    ("欧", "ōu", 1, 8, 15, "欠", "土"),
    ("司", "sī", 1, 5, 5, "口", "金"),
    ("诸", "zhū", 1, 10, 16, "讠", "金"),
    ("葛", "gě", 3, 12, 15, "艹", "木"),
    ("上", "shàng", 4, 3, 3, "一", "金"),
    ("官", "guān", 1, 8, 8, "宀", "木"),
)

COMPOUND_SURNAMES = ("欧阳", "司马", "诸葛", "上官")

SURNAME_MEANING = "姓氏"
