"""
Static inspiration sources: classical verses and four-character idioms.

POETRY_ROWS columns: (id, source, title, author, dynasty, verse, suitable characters)
IDIOM_ROWS columns: (idiom, pinyin, meaning, source, category, suitable characters)

Suitable characters are the ones a given name may borrow from the entry.
"""

POETRY_ROWS = (
    # ── 诗经 ──
    ("shijing-001", "诗经", "关雎", None, "周", "窈窕淑女，君子好逑", "淑君好"),
    ("shijing-002", "诗经", "桃夭", None, "周", "桃之夭夭，灼灼其华", "桃华宜灼"),
    ("shijing-003", "诗经", "采薇", None, "周", "昔我往矣，杨柳依依。今我来思，雨雪霏霏", "杨柳依思雨雪"),
    ("shijing-004", "诗经", "蒹葭", None, "周", "蒹葭苍苍，白露为霜。所谓伊人，在水一方", "露霜伊苍"),
    ("shijing-005", "诗经", "静女", None, "周", "静女其姝，俟我于城隅", "静姝城"),
    ("shijing-006", "诗经", "木瓜", None, "周", "投我以木瓜，报之以琼琚。匪报也，永以为好也", "琼琚永好"),
    ("shijing-007", "诗经", "鹿鸣", None, "周", "呦呦鹿鸣，食野之苹。我有嘉宾，鼓瑟吹笙", "鹿鸣苹嘉宾"),
    ("shijing-008", "诗经", "淇奥", None, "周", "有匪君子，如切如磋，如琢如磨", "君磋琢淇"),
    ("shijing-009", "诗经", "凯风", None, "周", "凯风自南，吹彼棘心", "凯风南心"),
    ("shijing-010", "诗经", "小星", None, "周", "嘒彼小星，三五在东", "星东"),
    ("shijing-011", "诗经", "柏舟", None, "周", "泛彼柏舟，亦泛其流", "柏舟"),
    ("shijing-012", "诗经", "硕人", None, "周", "硕人其颀，衣锦褧衣", "硕颀锦"),
    ("shijing-013", "诗经", "天保", None, "周", "如月之恒，如日之升", "月恒升"),
    ("shijing-014", "诗经", "鹤鸣", None, "周", "鹤鸣于九皋，声闻于天", "鸣天皋"),
    # ── 楚辞 ──
    ("chuci-001", "楚辞", "离骚", "屈原", "战国", "路漫漫其修远兮，吾将上下而求索", "修远漫索"),
    ("chuci-002", "楚辞", "离骚", "屈原", "战国", "唯草木之零落兮，恐美人之迟暮", "零美暮"),
    ("chuci-003", "楚辞", "九歌·湘君", "屈原", "战国", "采薜荔兮水中，搴芙蓉兮木末", "芙蓉荔"),
    ("chuci-004", "楚辞", "九歌·山鬼", "屈原", "战国", "既含睇兮又宜笑，子慕予兮善窈窕", "宜笑慕"),
    ("chuci-005", "楚辞", "九章·橘颂", "屈原", "战国", "苏世独立，横而不流兮", "立独苏"),
    ("chuci-006", "楚辞", "远游", "屈原", "战国", "内惟省以端操兮，求正气之所由", "端正操"),
    ("chuci-007", "楚辞", "九歌·湘夫人", "屈原", "战国", "沅有芷兮澧有兰，思公子兮未敢言", "芷兰思"),
    ("chuci-008", "楚辞", "九歌·少司命", "屈原", "战国", "秋兰兮青青，绿叶兮紫茎", "秋兰青"),
    # ── 唐诗 ──
    ("tang-001", "唐诗", "静夜思", "李白", "唐", "床前明月光，疑是地上霜", "明月光霜"),
    ("tang-002", "唐诗", "将进酒", "李白", "唐", "天生我材必有用，千金散尽还复来", "天才金"),
    ("tang-003", "唐诗", "早发白帝城", "李白", "唐", "两岸猿声啼不住，轻舟已过万重山", "舟山轻"),
    ("tang-004", "唐诗", "春晓", "孟浩然", "唐", "春眠不觉晓，处处闻啼鸟", "春晓"),
    ("tang-005", "唐诗", "登鹳雀楼", "王之涣", "唐", "欲穷千里目，更上一层楼", "千里楼"),
    ("tang-006", "唐诗", "相思", "王维", "唐", "红豆生南国，春来发几枝", "南春思"),
    ("tang-007", "唐诗", "山居秋暝", "王维", "唐", "明月松间照，清泉石上流", "明月松清泉"),
    ("tang-008", "唐诗", "江雪", "柳宗元", "唐", "孤舟蓑笠翁，独钓寒江雪", "舟江雪"),
    ("tang-009", "唐诗", "游子吟", "孟郊", "唐", "谁言寸草心，报得三春晖", "心春晖"),
    ("tang-010", "唐诗", "赋得古原草送别", "白居易", "唐", "离离原上草，一岁一枯荣", "原荣春"),
    ("tang-011", "唐诗", "望月怀远", "张九龄", "唐", "海上生明月，天涯共此时", "海明月天"),
    ("tang-012", "唐诗", "题都城南庄", "崔护", "唐", "人面桃花相映红", "桃红"),
    ("tang-013", "唐诗", "春夜喜雨", "杜甫", "唐", "好雨知时节，当春乃发生", "雨春"),
    ("tang-014", "唐诗", "望岳", "杜甫", "唐", "会当凌绝顶，一览众山小", "岳山凌"),
    ("tang-015", "唐诗", "登高", "杜甫", "唐", "无边落木萧萧下，不尽长江滚滚来", "江木"),
    ("tang-016", "唐诗", "行路难", "李白", "唐", "长风破浪会有时，直挂云帆济沧海", "风云海帆"),
    ("tang-017", "唐诗", "鹿柴", "王维", "唐", "返景入深林，复照青苔上", "林青"),
    ("tang-018", "唐诗", "竹里馆", "王维", "唐", "深林人不知，明月来相照", "林明月"),
    # ── 宋词 ──
    ("song-001", "宋词", "水调歌头", "苏轼", "宋", "但愿人长久，千里共婵娟", "久婵娟"),
    ("song-002", "宋词", "水调歌头", "苏轼", "宋", "明月几时有，把酒问青天", "明月青天"),
    ("song-003", "宋词", "念奴娇·赤壁怀古", "苏轼", "宋", "大江东去，浪淘尽，千古风流人物", "江东风"),
    ("song-004", "宋词", "虞美人", "李煜", "宋", "春花秋月何时了，往事知多少", "春秋月"),
    ("song-005", "宋词", "声声慢", "李清照", "宋", "寻寻觅觅，冷冷清清，凄凄惨惨戚戚", "清"),
    ("song-006", "宋词", "一剪梅", "李清照", "宋", "此情无计可消除，才下眉头，却上心头", "情心"),
    ("song-007", "宋词", "满江红", "岳飞", "宋", "壮志饥餐胡虏肉，笑谈渴饮匈奴血", "志"),
    ("song-008", "宋词", "青玉案·元夕", "辛弃疾", "宋", "众里寻他千百度，蓦然回首，那人却在，灯火阑珊处", "珊"),
    ("song-009", "宋词", "青玉案·元夕", "辛弃疾", "宋", "东风夜放花千树，更吹落，星如雨", "东风星雨"),
    ("song-010", "宋词", "鹊桥仙", "秦观", "宋", "两情若是久长时，又岂在朝朝暮暮", "情久若"),
    ("song-011", "宋词", "雨霖铃", "柳永", "宋", "多情自古伤离别，更那堪，冷落清秋节", "情清秋"),
    ("song-012", "宋词", "定风波", "苏轼", "宋", "竹杖芒鞋轻胜马，谁怕？一蓑烟雨任平生", "竹雨"),
    ("song-013", "宋词", "江城子·密州出猎", "苏轼", "宋", "会挽雕弓如满月，西北望，射天狼", "月望天"),
)

IDIOM_ROWS = (
    # 品德
    ("德高望重", "dé gāo wàng zhòng", "道德高尚，名望很大", "《晋书》", "品德", "德高望"),
    ("温文尔雅", "wēn wén ěr yǎ", "态度温和，举止文雅", "清·蒲松龄《聊斋志异》", "品德", "温文雅"),
    ("彬彬有礼", "bīn bīn yǒu lǐ", "形容文雅有礼貌", "《史记·司马相如列传》", "品德", "彬礼"),
    ("光明磊落", "guāng míng lěi luò", "心地光明，胸怀坦荡", "《晋书·石勒载记》", "品德", "光明磊"),
    ("厚德载物", "hòu dé zài wù", "道德深厚能容万物", "《周易·坤》", "品德", "德"),
    ("德才兼备", "dé cái jiān bèi", "品德和才能都具备", "元·无名氏《渔樵记》", "品德", "德才"),
    ("宽宏大量", "kuān hóng dà liàng", "度量大，能容人", "元·无名氏《渔樵记》", "品德", "宽宏"),
    ("虚怀若谷", "xū huái ruò gǔ", "胸怀像山谷一样宽广", "《老子》", "品德", "若"),
    ("正直无私", "zhèng zhí wú sī", "公正耿直，没有私心", "《左传》", "品德", "正"),
    ("宁静致远", "níng jìng zhì yuǎn", "心境平稳沉着，才能有所作为", "三国·诸葛亮《诫子书》", "品德", "静远"),
    # 才华
    ("才高八斗", "cái gāo bā dǒu", "形容人文才极高", "《南史·谢灵运传》", "才华", "才高"),
    ("学富五车", "xué fù wǔ chē", "读书很多，学问渊博", "《庄子·天下》", "才华", "学"),
    ("博学多才", "bó xué duō cái", "学识广博，有多方面的才能", "《晋书·郤诜传》", "才华", "博学才"),
    ("才华横溢", "cái huá héng yì", "非常有才华", "清·曾国藩《曾国藩家书》", "才华", "才华"),
    ("聪明伶俐", "cōng míng líng lì", "聪明灵活", "明·冯梦龙《醒世恒言》", "才华", "聪明"),
    ("独具匠心", "dú jù jiàng xīn", "具有独特的巧妙心思", "唐·王士源《孟浩然集序》", "才华", "心"),
    ("妙笔生花", "miào bǐ shēng huā", "形容写作能力极强", "唐·李白《与韩荆州书》", "才华", "妙"),
    # 美好
    ("春华秋实", "chūn huá qiū shí", "春天开花，秋天结果", "《后汉书》", "美好", "春华秋实"),
    ("花好月圆", "huā hǎo yuè yuán", "花儿正盛开，月亮正圆满", "宋·晁端礼《行香子》", "美好", "月"),
    ("欣欣向荣", "xīn xīn xiàng róng", "形容草木茂盛", "晋·陶渊明《归去来兮辞》", "美好", "欣荣"),
    ("繁花似锦", "fán huā sì jǐn", "繁密的花朵像锦绣一样", "《警世通言》", "美好", "锦"),
    ("如花似玉", "rú huā sì yù", "像花和玉一样美好", "《诗经·魏风·汾沮洳》", "美好", "玉"),
    ("风华正茂", "fēng huá zhèng mào", "青春才华正旺盛", "毛泽东《沁园春·长沙》", "美好", "风华茂"),
    ("金玉满堂", "jīn yù mǎn táng", "财富极多，也比喻学识丰富", "《老子》", "美好", "玉"),
    # 成功
    ("马到成功", "mǎ dào chéng gōng", "形容迅速取得成功", "元·张国宾《薛仁贵》", "成功", "成功"),
    ("一帆风顺", "yī fān fēng shùn", "船挂着帆顺风行驶", "清·李渔《怜香伴》", "成功", "风顺"),
    ("锦上添花", "jǐn shàng tiān huā", "在锦上再绣花", "宋·黄庭坚《谢薄刺史一百韵》", "成功", "锦"),
    ("功成名就", "gōng chéng míng jiù", "功业建成，名声显扬", "《墨子·修身》", "成功", "功成"),
    ("鹏程万里", "péng chéng wàn lǐ", "前程远大", "《庄子·逍遥游》", "成功", "鹏程"),
    ("志存高远", "zhì cún gāo yuǎn", "志向远大", "三国·诸葛亮《诫外甥书》", "成功", "志高远"),
    ("锦绣前程", "jǐn xiù qián chéng", "比喻美好的前途", "元·王实甫《西厢记》", "成功", "锦秀程"),
    ("安居乐业", "ān jū lè yè", "安定地生活，愉快地工作", "《汉书·货殖传》", "成功", "安乐"),
    # 自然
    ("山清水秀", "shān qīng shuǐ xiù", "风景优美", "宋·黄庭坚《蓦山溪》", "自然", "山清秀"),
    ("风和日丽", "fēng hé rì lì", "微风和煦，阳光明丽", "唐·无名氏《句》", "自然", "风和丽"),
    ("云淡风轻", "yún dàn fēng qīng", "云淡风也轻", "宋·程颢《春日偶成》", "自然", "云风"),
    ("春暖花开", "chūn nuǎn huā kāi", "春天气候温暖，百花盛开", "明·朱国祯《涌幢小品》", "自然", "春"),
    ("明月清风", "míng yuè qīng fēng", "月儿明亮，风儿清爽", "《南史·褚彦回传》", "自然", "明月清风"),
    ("海纳百川", "hǎi nà bǎi chuān", "比喻包容广大", "晋·袁宏《三国名臣序赞》", "自然", "海"),
    # 智慧
    ("明察秋毫", "míng chá qiū háo", "目光敏锐，能看清极细小的东西", "《孟子·梁惠王上》", "智慧", "明秋"),
    ("足智多谋", "zú zhì duō móu", "富有智慧，善于谋划", "元·关汉卿《单刀会》", "智慧", "智"),
    ("深思熟虑", "shēn sī shú lǜ", "深入细致地考虑", "《楚辞·九章》", "智慧", "思"),
    ("大智若愚", "dà zhì ruò yú", "大智慧的人不露锋芒", "《老子》", "智慧", "智若"),
    # 情感
    ("心心相印", "xīn xīn xiāng yìn", "彼此心意相通", "《六祖大师法宝坛经》", "情感", "心"),
    ("情深似海", "qíng shēn sì hǎi", "感情像海一样深", "明·崔时佩《西厢记》", "情感", "情海"),
    ("依依不舍", "yī yī bù shě", "舍不得分离", "《诗经·小雅·采薇》", "情感", "依"),
    ("喜笑颜开", "xǐ xiào yán kāi", "心情愉快，满面笑容", "明·冯梦龙《醒世恒言》", "情感", "颜"),
    ("心旷神怡", "xīn kuàng shén yí", "心情舒畅，精神愉快", "宋·范仲淹《岳阳楼记》", "情感", "心怡"),
    ("情深义重", "qíng shēn yì zhòng", "感情深，情义重", "清·曹雪芹《红楼梦》", "情感", "情义"),
    ("其乐融融", "qí lè róng róng", "快乐和谐的样子", "《左传·隐公元年》", "情感", "乐融"),
)

CLASSIC_SOURCES = ("诗经", "楚辞")
