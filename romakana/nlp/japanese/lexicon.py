"""Static lexicons for romaji processing.

All tables are plain dicts at module level and get frozen into a single
:class:`Lexicon` instance (``DEFAULT_LEXICON``) at import time. Components
receive the lexicon by reference and only ever read from it.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Optional, Tuple


class Particle(NamedTuple):
    kana: str
    role: str


class KnownTitle(NamedTuple):
    japanese: str
    english: str
    type: str  # anime, name, game


# ──────────────────────────────────────────────────────────────────────────────
# ROMAJI → HIRAGANA (Hepburn + common variants)
# ──────────────────────────────────────────────────────────────────────────────
ROMAJI_MAP: Dict[str, str] = {
    # Vowels
    'a': 'あ', 'i': 'い', 'u': 'う', 'e': 'え', 'o': 'お',

    # K / G
    'ka': 'か', 'ki': 'き', 'ku': 'く', 'ke': 'け', 'ko': 'こ',
    'kya': 'きゃ', 'kyu': 'きゅ', 'kyo': 'きょ',
    'ga': 'が', 'gi': 'ぎ', 'gu': 'ぐ', 'ge': 'げ', 'go': 'ご',
    'gya': 'ぎゃ', 'gyu': 'ぎゅ', 'gyo': 'ぎょ',

    # S / Z
    'sa': 'さ', 'shi': 'し', 'si': 'し', 'su': 'す', 'se': 'せ', 'so': 'そ',
    'sha': 'しゃ', 'shu': 'しゅ', 'sho': 'しょ',
    'sya': 'しゃ', 'syu': 'しゅ', 'syo': 'しょ',
    'za': 'ざ', 'ji': 'じ', 'zi': 'じ', 'zu': 'ず', 'ze': 'ぜ', 'zo': 'ぞ',
    'ja': 'じゃ', 'ju': 'じゅ', 'jo': 'じょ',
    'jya': 'じゃ', 'jyu': 'じゅ', 'jyo': 'じょ',
    'zya': 'じゃ', 'zyu': 'じゅ', 'zyo': 'じょ',

    # T / D ("ti" and "di" are the foreign-sound forms below)
    'ta': 'た', 'chi': 'ち', 'tsu': 'つ', 'tu': 'つ', 'te': 'て', 'to': 'と',
    'cha': 'ちゃ', 'chu': 'ちゅ', 'cho': 'ちょ',
    'tya': 'ちゃ', 'tyu': 'ちゅ', 'tyo': 'ちょ',
    'da': 'だ', 'du': 'づ', 'de': 'で', 'do': 'ど',
    'dya': 'ぢゃ', 'dyu': 'ぢゅ', 'dyo': 'ぢょ',

    # N
    'na': 'な', 'ni': 'に', 'nu': 'ぬ', 'ne': 'ね', 'no': 'の',
    'nya': 'にゃ', 'nyu': 'にゅ', 'nyo': 'にょ',
    'n': 'ん', 'nn': 'ん', "n'": 'ん',

    # H / B / P
    'ha': 'は', 'hi': 'ひ', 'fu': 'ふ', 'hu': 'ふ', 'he': 'へ', 'ho': 'ほ',
    'hya': 'ひゃ', 'hyu': 'ひゅ', 'hyo': 'ひょ',
    'ba': 'ば', 'bi': 'び', 'bu': 'ぶ', 'be': 'べ', 'bo': 'ぼ',
    'bya': 'びゃ', 'byu': 'びゅ', 'byo': 'びょ',
    'pa': 'ぱ', 'pi': 'ぴ', 'pu': 'ぷ', 'pe': 'ぺ', 'po': 'ぽ',
    'pya': 'ぴゃ', 'pyu': 'ぴゅ', 'pyo': 'ぴょ',

    # M / Y / R / W
    'ma': 'ま', 'mi': 'み', 'mu': 'む', 'me': 'め', 'mo': 'も',
    'mya': 'みゃ', 'myu': 'みゅ', 'myo': 'みょ',
    'ya': 'や', 'yu': 'ゆ', 'yo': 'よ',
    'ra': 'ら', 'ri': 'り', 'ru': 'る', 're': 'れ', 'ro': 'ろ',
    'rya': 'りゃ', 'ryu': 'りゅ', 'ryo': 'りょ',
    'wa': 'わ', 'wi': 'ゐ', 'we': 'ゑ', 'wo': 'を',

    # Foreign sounds
    'fa': 'ふぁ', 'fi': 'ふぃ', 'fe': 'ふぇ', 'fo': 'ふぉ',
    'va': 'ゔぁ', 'vi': 'ゔぃ', 'vu': 'ゔ', 've': 'ゔぇ', 'vo': 'ゔぉ',
    'tsa': 'つぁ', 'tsi': 'つぃ', 'tse': 'つぇ', 'tso': 'つぉ',
    'ti': 'てぃ', 'di': 'でぃ',

    # Small kana
    'xa': 'ぁ', 'xi': 'ぃ', 'xu': 'ぅ', 'xe': 'ぇ', 'xo': 'ぉ',
    'xya': 'ゃ', 'xyu': 'ゅ', 'xyo': 'ょ',
    'xtu': 'っ', 'xtsu': 'っ', 'ltu': 'っ', 'ltsu': 'っ',
}

# Macron / circumflex vowels → the kana that lengthens them
LONG_VOWEL_MAP: Dict[str, str] = {
    'ā': 'あ', 'ī': 'い', 'ū': 'う', 'ē': 'い', 'ō': 'う',
    'â': 'あ', 'î': 'い', 'û': 'う', 'ê': 'い', 'ô': 'う',
}

# Two-letter vowel runs kept as written ("gakkou" → がっこう)
LONG_VOWEL_SEQUENCES: Dict[str, str] = {
    'ou': 'おう',
    'uu': 'うう',
    'ii': 'いい',
    'ei': 'えい',
}


# ──────────────────────────────────────────────────────────────────────────────
# WORD DICTIONARY (word boundary detection for unspaced input)
# ──────────────────────────────────────────────────────────────────────────────
WORD_DICTIONARY: Dict[str, str] = {
    # Pronouns
    'watashi': 'わたし', 'watakushi': 'わたくし', 'boku': 'ぼく', 'ore': 'おれ',
    'anata': 'あなた', 'kimi': 'きみ', 'kare': 'かれ', 'kanojo': 'かのじょ',
    'karera': 'かれら', 'watashitachi': 'わたしたち', 'bokutachi': 'ぼくたち',

    # Verbs (dictionary form)
    'taberu': 'たべる', 'nomu': 'のむ', 'iku': 'いく', 'kuru': 'くる',
    'miru': 'みる', 'kiku': 'きく', 'hanasu': 'はなす', 'yomu': 'よむ',
    'kaku': 'かく', 'suru': 'する', 'aru': 'ある', 'iru': 'いる',
    'naru': 'なる', 'omou': 'おもう', 'shiru': 'しる', 'wakaru': 'わかる',

    # Verbs (masu / te / ta forms)
    'tabemasu': 'たべます', 'nomimasu': 'のみます', 'ikimasu': 'いきます',
    'kimasu': 'きます', 'mimasu': 'みます', 'kikimasu': 'ききます',
    'hanashimasu': 'はなします', 'yomimasu': 'よみます', 'kakimasu': 'かきます',
    'shimasu': 'します', 'arimasu': 'あります', 'imasu': 'います',
    'narimasu': 'なります', 'omoimasu': 'おもいます',
    'wakarimasu': 'わかります', 'shiteimasu': 'しています',
    'tabete': 'たべて', 'nonde': 'のんで', 'itte': 'いって', 'kite': 'きて',
    'mite': 'みて', 'kiite': 'きいて', 'hanashite': 'はなして',
    'tabeta': 'たべた', 'nonda': 'のんだ', 'itta': 'いった', 'kita': 'きた',

    # Copula and auxiliaries
    'desu': 'です', 'deshita': 'でした', 'masu': 'ます', 'mashita': 'ました',
    'masen': 'ません', 'dewa': 'では', 'janai': 'じゃない',
    'darou': 'だろう', 'deshou': 'でしょう',

    # i-adjectives
    'ookii': 'おおきい', 'chiisai': 'ちいさい', 'takai': 'たかい',
    'yasui': 'やすい', 'atarashii': 'あたらしい', 'furui': 'ふるい',
    'ii': 'いい', 'yoi': 'よい', 'warui': 'わるい', 'nagai': 'ながい',
    'mijikai': 'みじかい', 'hayai': 'はやい', 'osoi': 'おそい',
    'oishii': 'おいしい', 'mazui': 'まずい', 'tanoshii': 'たのしい',
    'kanashii': 'かなしい', 'ureshii': 'うれしい', 'kawaii': 'かわいい',
    'utsukushii': 'うつくしい', 'kirei': 'きれい', 'karei': 'かれい',

    # na-adjectives
    'shizuka': 'しずか', 'nigiyaka': 'にぎやか',
    'genki': 'げんき', 'benri': 'べんり', 'taisetsu': 'たいせつ',
    'daijoubu': 'だいじょうぶ', 'hontou': 'ほんとう', 'taihen': 'たいへん',

    # Nouns
    'hito': 'ひと', 'mono': 'もの', 'koto': 'こと', 'tokoro': 'ところ',
    'toki': 'とき', 'hi': 'ひ', 'asa': 'あさ', 'hiru': 'ひる', 'yoru': 'よる',
    'ima': 'いま', 'kyou': 'きょう', 'ashita': 'あした', 'kinou': 'きのう',
    'gakusei': 'がくせい', 'sensei': 'せんせい', 'tomodachi': 'ともだち',
    'kazoku': 'かぞく', 'kodomo': 'こども', 'otona': 'おとな',
    'nihon': 'にほん', 'nihongo': 'にほんご', 'eigo': 'えいご',
    'namae': 'なまえ', 'denwa': 'でんわ', 'kuruma': 'くるま',
    'ie': 'いえ', 'uchi': 'うち', 'mise': 'みせ', 'eki': 'えき',
    'gakkou': 'がっこう', 'daigaku': 'だいがく', 'kaisha': 'かいしゃ',
    'shigoto': 'しごと', 'benkyou': 'べんきょう', 'ryokou': 'りょこう',
    'tabemono': 'たべもの', 'nomimono': 'のみもの', 'gohan': 'ごはん',
    'mizu': 'みず', 'ocha': 'おちゃ', 'sake': 'さけ',
    'neko': 'ねこ', 'inu': 'いぬ', 'sakana': 'さかな', 'tori': 'とり',
    'hana': 'はな', 'ki': 'き', 'yama': 'やま', 'kawa': 'かわ', 'umi': 'うみ',
    'sora': 'そら', 'ame': 'あめ', 'yuki': 'ゆき', 'kaze': 'かぜ',
    'joou': 'じょおう', 'ousama': 'おうさま', 'ouji': 'おうじ', 'ohime': 'おひめ',

    # Places
    'toukyou': 'とうきょう', 'tokyo': 'とうきょう',
    'oosaka': 'おおさか', 'osaka': 'おおさか',
    'kyouto': 'きょうと', 'kyoto': 'きょうと',

    # Greetings and set phrases
    'konnichiwa': 'こんにちは', 'konbanwa': 'こんばんは',
    'ohayou': 'おはよう', 'ohayougozaimasu': 'おはようございます',
    'arigatou': 'ありがとう', 'arigatougozaimasu': 'ありがとうございます',
    'sumimasen': 'すみません', 'gomennasai': 'ごめんなさい',
    'sayounara': 'さようなら', 'oyasumi': 'おやすみ', 'oyasuminasai': 'おやすみなさい',
    'itadakimasu': 'いただきます', 'gochisousama': 'ごちそうさま',
    'hajimemashite': 'はじめまして', 'yoroshiku': 'よろしく',
    'yoroshikuonegaishimasu': 'よろしくおねがいします',

    # Question words
    'nani': 'なに', 'nan': 'なん', 'dare': 'だれ', 'doko': 'どこ',
    'itsu': 'いつ', 'naze': 'なぜ', 'doushite': 'どうして',
    'dou': 'どう', 'ikura': 'いくら', 'ikutsu': 'いくつ',

    # Demonstratives
    'kore': 'これ', 'sore': 'それ', 'are': 'あれ', 'dore': 'どれ',
    'kono': 'この', 'sono': 'その', 'ano': 'あの', 'dono': 'どの',
    'koko': 'ここ', 'soko': 'そこ', 'asoko': 'あそこ',
    'kochira': 'こちら', 'sochira': 'そちら', 'achira': 'あちら',

    # Numbers
    'ichi': 'いち', 'ni': 'に', 'san': 'さん', 'shi': 'し', 'yon': 'よん',
    'go': 'ご', 'roku': 'ろく', 'shichi': 'しち', 'nana': 'なな',
    'hachi': 'はち', 'kyuu': 'きゅう', 'ku': 'く', 'juu': 'じゅう',
    'hyaku': 'ひゃく', 'sen': 'せん', 'man': 'まん',

    # Adverbs
    'totemo': 'とても', 'sugoku': 'すごく', 'chotto': 'ちょっと',
    'mou': 'もう', 'mada': 'まだ', 'itsumo': 'いつも', 'tokidoki': 'ときどき',
    'zenzen': 'ぜんぜん', 'amari': 'あまり', 'motto': 'もっと',
    'issho': 'いっしょ', 'hitori': 'ひとり', 'futari': 'ふたり',

    # Conjunctions
    'soshite': 'そして', 'dakara': 'だから', 'demo': 'でも', 'shikashi': 'しかし',
    'sorekara': 'それから', 'soreto': 'それと', 'mata': 'また',

    # Honorific suffixes and titles
    'sama': 'さま', 'kun': 'くん', 'chan': 'ちゃん',
    'senpai': 'せんぱい', 'kouhai': 'こうはい',
}

PARTICLES: Dict[str, Particle] = {
    'wa': Particle('は', 'topic'),
    'ga': Particle('が', 'subject'),
    'wo': Particle('を', 'object'),
    'o': Particle('を', 'object'),
    'ni': Particle('に', 'location/time/target'),
    'de': Particle('で', 'location/means'),
    'to': Particle('と', 'and/with/quotation'),
    'he': Particle('へ', 'direction'),
    'e': Particle('へ', 'direction'),
    'no': Particle('の', 'possession/modifier'),
    'ka': Particle('か', 'question'),
    'mo': Particle('も', 'also/too'),
    'ya': Particle('や', 'and (non-exhaustive)'),
    'ne': Particle('ね', 'confirmation'),
    'yo': Particle('よ', 'emphasis'),
    'na': Particle('な', 'prohibition/na-adj'),
    'kara': Particle('から', 'from/because'),
    'made': Particle('まで', 'until/to'),
    'dake': Particle('だけ', 'only'),
    'shika': Particle('しか', 'only (with negative)'),
    'nado': Particle('など', 'etc.'),
    'bakari': Particle('ばかり', 'just/only'),
}


# ──────────────────────────────────────────────────────────────────────────────
# KNOWN TITLES & PROPER NAMES (never translated literally)
# ──────────────────────────────────────────────────────────────────────────────
KNOWN_TITLES: Dict[str, KnownTitle] = {
    'sousou no frieren': KnownTitle('葬送のフリーレン', "Frieren: Beyond Journey's End", 'anime'),
    'frieren': KnownTitle('フリーレン', 'Frieren (character name)', 'name'),
    'shingeki no kyojin': KnownTitle('進撃の巨人', 'Attack on Titan', 'anime'),
    'kimetsu no yaiba': KnownTitle('鬼滅の刃', 'Demon Slayer', 'anime'),
    'jujutsu kaisen': KnownTitle('呪術廻戦', 'Jujutsu Kaisen (Sorcery Fight)', 'anime'),
    'boku no hero academia': KnownTitle('僕のヒーローアカデミア', 'My Hero Academia', 'anime'),
    'one piece': KnownTitle('ワンピース', 'One Piece', 'anime'),
    'naruto': KnownTitle('ナルト', 'Naruto', 'anime'),
    'naruto shippuden': KnownTitle('ナルト疾風伝', 'Naruto Shippuden', 'anime'),
    'boruto': KnownTitle('ボルト', 'Boruto', 'anime'),
    'dragon ball': KnownTitle('ドラゴンボール', 'Dragon Ball', 'anime'),
    'bleach': KnownTitle('ブリーチ', 'Bleach', 'anime'),
    'death note': KnownTitle('デスノート', 'Death Note', 'anime'),
    'fullmetal alchemist': KnownTitle('鋼の錬金術師', 'Fullmetal Alchemist', 'anime'),
    'hagane no renkinjutsushi': KnownTitle('鋼の錬金術師', 'Fullmetal Alchemist', 'anime'),
    'spy x family': KnownTitle('スパイファミリー', 'Spy x Family', 'anime'),
    'chainsaw man': KnownTitle('チェンソーマン', 'Chainsaw Man', 'anime'),
    'tokyo revengers': KnownTitle('東京リベンジャーズ', 'Tokyo Revengers', 'anime'),
    'mob psycho': KnownTitle('モブサイコ', 'Mob Psycho 100', 'anime'),
    'one punch man': KnownTitle('ワンパンマン', 'One Punch Man', 'anime'),
    'steins gate': KnownTitle('シュタインズ・ゲート', 'Steins;Gate', 'anime'),
    'cowboy bebop': KnownTitle('カウボーイビバップ', 'Cowboy Bebop', 'anime'),
    'neon genesis evangelion': KnownTitle('新世紀エヴァンゲリオン', 'Neon Genesis Evangelion', 'anime'),
    'evangelion': KnownTitle('エヴァンゲリオン', 'Evangelion', 'anime'),
    'sword art online': KnownTitle('ソードアート・オンライン', 'Sword Art Online', 'anime'),
    'konosuba': KnownTitle('このすば', "KonoSuba: God's Blessing on This Wonderful World!", 'anime'),
    're zero': KnownTitle('リゼロ', 'Re:Zero − Starting Life in Another World', 'anime'),
    'mushoku tensei': KnownTitle('無職転生', 'Mushoku Tensei: Jobless Reincarnation', 'anime'),
    'oshi no ko': KnownTitle('推しの子', 'Oshi no Ko (My Star)', 'anime'),
    'bocchi the rock': KnownTitle('ぼっち・ざ・ろっく', 'Bocchi the Rock!', 'anime'),
    'solo leveling': KnownTitle('俺だけレベルアップな件', 'Solo Leveling', 'anime'),
    'kaiju no 8': KnownTitle('怪獣8号', 'Kaiju No. 8', 'anime'),
    'demon slayer': KnownTitle('鬼滅の刃', 'Demon Slayer: Kimetsu no Yaiba', 'anime'),
    'violet evergarden': KnownTitle('ヴァイオレット・エヴァーガーデン', 'Violet Evergarden', 'anime'),
    'your name': KnownTitle('君の名は', 'Your Name (Kimi no Na wa)', 'anime'),
    'kimi no na wa': KnownTitle('君の名は', 'Your Name', 'anime'),
    'spirited away': KnownTitle('千と千尋の神隠し', 'Spirited Away', 'anime'),
    'howls moving castle': KnownTitle('ハウルの動く城', "Howl's Moving Castle", 'anime'),
    'totoro': KnownTitle('となりのトトロ', 'My Neighbor Totoro', 'anime'),
    'pokemon': KnownTitle('ポケモン', 'Pokémon', 'anime'),
    'pikachu': KnownTitle('ピカチュウ', 'Pikachu (Pokémon character)', 'name'),
    'genshin impact': KnownTitle('原神', 'Genshin Impact', 'game'),
    'final fantasy': KnownTitle('ファイナルファンタジー', 'Final Fantasy', 'game'),
    'zelda': KnownTitle('ゼルダ', 'The Legend of Zelda', 'game'),
    'mario': KnownTitle('マリオ', 'Mario (Nintendo character)', 'name'),
}


# ──────────────────────────────────────────────────────────────────────────────
# OFFLINE TRANSLATIONS (hiragana → English, checked before any remote lookup)
# ──────────────────────────────────────────────────────────────────────────────
OFFLINE_TRANSLATIONS: Dict[str, str] = {
    # Greetings
    'こんにちは': 'hello; good afternoon',
    'こんばんは': 'good evening',
    'おはよう': 'good morning (casual)',
    'おはようございます': 'good morning (polite)',
    'さようなら': 'goodbye',
    'おやすみ': 'good night (casual)',
    'おやすみなさい': 'good night (polite)',
    'ありがとう': 'thank you (casual)',
    'ありがとうございます': 'thank you very much (polite)',
    'すみません': 'excuse me; sorry',
    'ごめんなさい': "I'm sorry",
    'いただきます': "let's eat (before meal)",
    'ごちそうさま': 'thank you for the meal',
    'ごちそうさまでした': 'thank you for the meal (polite)',
    'はじめまして': 'nice to meet you',
    'よろしく': 'please treat me well',
    'よろしくおねがいします': 'pleased to meet you; please help me',

    # Pronouns
    'わたし': 'I; me',
    'わたしは': 'I (topic)',
    'ぼく': 'I; me (masculine)',
    'ぼくは': 'I (topic, masculine)',
    'あなた': 'you',
    'かれ': 'he; him',
    'かのじょ': 'she; her; girlfriend',

    # Copula and endings
    'です': 'is; am; are (copula)',
    'ます': 'polite verb ending',
    'ません': 'polite negative verb ending',
    'でした': 'was; were',
    'だいじょうぶ': 'okay; all right; fine',
    'だいじょうぶです': "it's okay; I'm fine",
    'わかりました': 'I understood; got it',
    'わかりません': "I don't understand",
    'しりません': "I don't know",

    # Places
    'とうきょう': 'Tokyo',
    'おおさか': 'Osaka',
    'きょうと': 'Kyoto',
    'にほん': 'Japan',

    # Nouns
    'がくせい': 'student',
    'せんせい': 'teacher',
    'ともだち': 'friend',
    'かぞく': 'family',
    'にほんご': 'Japanese language',
    'えいご': 'English language',
    'たべもの': 'food',
    'のみもの': 'drink; beverage',
    'べんきょう': 'study',
    'しごと': 'work; job',
    'じょおう': 'queen',

    # Adjectives
    'かわいい': 'cute',
    'きれい': 'beautiful; clean',
    'おいしい': 'delicious',
    'たのしい': 'fun; enjoyable',
    'うれしい': 'happy; glad',
    'かなしい': 'sad',
    'おおきい': 'big; large',
    'ちいさい': 'small; little',
    'あたらしい': 'new',
    'ふるい': 'old',
    'いい': 'good',
    'わるい': 'bad',

    # Verbs
    'たべます': 'eat (polite)',
    'のみます': 'drink (polite)',
    'いきます': 'go (polite)',
    'きます': 'come (polite)',
    'します': 'do (polite)',
    'みます': 'see; watch (polite)',
    'ききます': 'listen; hear (polite)',
    'はなします': 'speak; talk (polite)',
    'よみます': 'read (polite)',
    'かきます': 'write (polite)',
    'わかります': 'understand (polite)',
    'しています': 'is doing (polite progressive)',
}


class SegmentEntry(NamedTuple):
    """A word or particle the segmenter may place at any position."""
    romaji: str
    kana: str
    is_particle: bool


@dataclass(frozen=True)
class Lexicon:
    """Read-only bundle of every table the romaji pipeline consults."""
    romaji_map: Mapping[str, str]
    long_vowels: Mapping[str, str]
    long_vowel_sequences: Mapping[str, str]
    words: Mapping[str, str]
    particles: Mapping[str, Particle]
    titles: Mapping[str, KnownTitle]
    offline_translations: Mapping[str, str]
    segment_entries: Tuple[SegmentEntry, ...] = field(init=False, repr=False)

    def __post_init__(self):
        # Words and particles share one candidate list; a particle's kana
        # wins for keys present in both, table order is kept for equal lengths.
        combined: Dict[str, str] = dict(self.words)
        for key, particle in self.particles.items():
            combined[key] = particle.kana
        entries = sorted(
            (SegmentEntry(key, kana, key in self.particles) for key, kana in combined.items()),
            key=lambda entry: -len(entry.romaji),
        )
        object.__setattr__(self, 'segment_entries', tuple(entries))

    @classmethod
    def build(
        cls,
        romaji_map: Optional[Dict[str, str]] = None,
        long_vowels: Optional[Dict[str, str]] = None,
        long_vowel_sequences: Optional[Dict[str, str]] = None,
        words: Optional[Dict[str, str]] = None,
        particles: Optional[Dict[str, Particle]] = None,
        titles: Optional[Dict[str, KnownTitle]] = None,
        offline_translations: Optional[Dict[str, str]] = None,
    ) -> 'Lexicon':
        """Freeze the given tables (module defaults for anything omitted)."""
        def freeze(table, default):
            return MappingProxyType(dict(default if table is None else table))

        return cls(
            romaji_map=freeze(romaji_map, ROMAJI_MAP),
            long_vowels=freeze(long_vowels, LONG_VOWEL_MAP),
            long_vowel_sequences=freeze(long_vowel_sequences, LONG_VOWEL_SEQUENCES),
            words=freeze(words, WORD_DICTIONARY),
            particles=freeze(particles, PARTICLES),
            titles=freeze(titles, KNOWN_TITLES),
            offline_translations=freeze(offline_translations, OFFLINE_TRANSLATIONS),
        )

    def lookup_word(self, romaji: str) -> Optional[str]:
        return self.words.get(romaji)

    def lookup_particle(self, romaji: str) -> Optional[Particle]:
        return self.particles.get(romaji)

    def lookup_offline(self, kana: str) -> Optional[str]:
        return self.offline_translations.get(kana)

    def is_known_word(self, romaji: str) -> bool:
        """True if *romaji* is in the word dictionary or the particle table."""
        return romaji in self.words or romaji in self.particles


DEFAULT_LEXICON = Lexicon.build()
