"""Emoji looked up by English keywords."""

from __future__ import annotations

from bisect import bisect_left

# Whitespace-separated pairs of "keyword emoji".
_DATA = """
a 🅰 ab 🆎 abacus 🧮 abc 🔤 abcd 🔡 access ♿
actor 🧑‍🎤 adore 🥰 adult 🧑 aerial 🚡 afro 🦱 aid ⛑
alarm ⏰ alien 👽 alpaca 🦙 amoeba 🦠 anchor ⚓ angel 😇
angry 😡 ant 🐜 ape 🦧 apple 🍎 archer 🏹 arctic 🐻‍❄
arepa 🫓 army 🪖 arrow 💘 art 🎭 artist 🧑‍🎨 ashes ⚱
ask 🙏 atm 🏧 atom ⚛ autumn 🥮 axe 🪓 b 🅱
baby 👶 back 🔙 bacon 🥓 badge 📛 badger 🦡 bag 👜
bagel 🥯 bait 🪤 bakery 🥯 bald 🦲 ball 🏌 ballet 🩰
ballot 🗳 bamboo 🎍 banana 🍌 banjo 🪕 bank 🏦 banner 🎋
bar 🍫 barber 💇 basket 🧺 bat 🦇 bath 🛀 beach 🏖
beacon 🚨 bead 🧿 beads 📿 bear 🐻 beard 🧔 bearer 🐍
beat 🪘 beauty 💇 beaver 🦫 bed 🛏 bee 🐝 beer 🍺
beetle 🪲 bell 🛎 bento 🍱 berry 🫐 biceps 💪 bike 🚵
biking 🚴 bikini 👙 bill 💴 bird 🪶 birdie 🏸 bison 🦬
bisque 🦞 black 🖤 bleed 🩸 blind 🧑‍🦯 blond 👱 blonde 👱‍♀
blow 🍃 blue 🫐 blush 😊 boar 🐗 board 🛹 boat 🚣
body 👂 bolt 🔩 bomb 💣 bone 🦴 book 📔 books 📚
boom 💥 boot 🥾 bored 🥱 boring 🪴 bottle 🍼 bow 🙇
bowing 🙇‍♂ bowl 🍜 box 🍱 boxing 🥊 boy 👦 brain 🧠
bread 🍞 break 💔 breast 🤱 breath 🫁 brick 🧱 bricks 🧱
bride 👰 bridge 🌉 briefs 🩲 bright 😎 broken 💔 bronze 🥉
broom 🧹 brown 🤎 brush 🪥 bubble 🧋 bucket 🪣 bug 🪲
bulb 💡 bull 🐂 bullet 🚅 bunny 🐰 burger 🍔 bus 🚌
bust 👤 butter 🧈 button 🔼 c © cable 🚠 cactus 🌵
cake 🍥 call 🤙 camel 🐪 camera 🤳 can 🥫 cancel ✖
candle 🕯 candy 🍬 canoe 🛶 cap 👲 car 🚃 card ♠
care 💅 carp 🎏 carrot 🥕 cart 🛒 cask 🪣 castle 🏯
cat 😺 catch 🪝 cd 💿 cell 📱 cereal 🥣 chain ⛓
chains ⛓ chair 💺 chapel 💒 charm 🧿 chart 💹 check ✅
cheese 🫕 chef 🧑‍🍳 cherry 🌸 chess ♟ chest 🧰 chick 🐣
child 🧒 chime 🎐 chop 🥩 church ⛪ cinema 🎥 circle ⏺
circus 🎪 citrus 🍋 city 🏙 cl 🆑 claim 🛄 clamp 🗜
clap 👏 claus 🎅 claws 🦞 clay 🧱 clean 🪥 climb 🪜
clink 🍻 clock ⌚ closed 😚 closet 🚾 cloud ☁ clover 🍀
clown 🤡 clue 🧩 coat 🧥 coder 🧑‍💻 coffee ☕ coffin ⚰
cog ⚙ coin 🪙 cold 😅 comet ☄ comic 💢 conga 🪘
congee 🥣 cook 🧑‍🍳 cooked 🍚 cookie 🍪 cool 😎 cop 👮
cork 🍾 corn 🌽 couch 🛋 couple 🧑‍🤝‍🧑 cover 📔 cow 🐮
cowboy 🤠 crab 🦀 crayon 🖍 cream 🍦 credit 💳 crook 🪝
cross 🤞 crown 👑 crush 🥰 cry 😢 cup 🍵 cupid 💘
curl 📃 curly 🦱 curry 🍛 curve 🪝 cygnet 🦢 dagger 🗡
dairy 🧈 dam 🦫 dance 🕺 dancer 👯 danger ⚡ dango 🍡
dark 🌑 dart 🎯 dash 💨 date 📅 dazed 😳 deaf 🧏
death 💀 deer 🦌 demon 👿 dental 🪥 desert 🏜 devil 👿
dharma ☸ dialog 💬 diaper 🧷 dice 🎲 die 🎲 diesel ⛽
dim 🔅 dish 📡 disk 💽 divide ➗ diving 🦪 diya 🪔
dizzy 🥴 djinn 🧞 dna 🧬 doctor 😷 dodo 🦤 dog 🐶
doll 🪆 dollar 💰 donut 🍩 door 🚪 double ⏩ doubt 🤷
dove 🕊 down 👇 dragon 🐲 dress 👗 drink 🫖 drop ☔
drum 🪘 duck 🦆 dung 💩 dupe ♟ dusk 🌆 dvd 📀
eagle 🦅 ear 👂 earbud 🎧 earth 🌍 east ➡ egg 🥚
eight 🕗 eject ⏏ eleven 🕚 elf 🧝 email ✉ emblem 🔱
end 🔚 engine 🚂 entry ⛔ euro 💶 evil 🙈 ewe 🐑
eye 😄 eyes 🤩 face 🥸 fairy 🧚 family 👪 farmer 🧑‍🌾
fast ⏩ father 🎅 favor 🙇‍♂ fax 📠 fear 😨 feet 🐾
female 🐑 fencer 🤺 ferris 🎡 ferry ⛴ fever 🦟 field 🏑
file 📁 filing 🗄 film 🎞 finger 🖐 fire 🚒 first 🥇
fish 🐟 fist ✊ five 🕔 flag 🏳‍⚧ flame 🔥 flash 📸
flex 💪 flight 🪶 floor 🤣 floppy 💾 flower 💐 fly 🪰
fog 🌁 foggy 🌁 folder 📁 fondue 🫕 food 🫒 foot 🦶
fork 🍽 four 🍀 fox 🦊 frame 🪟 frames 🎞 free 🆓
french 🥐 fried 🍤 fries 🍟 frog 🐸 frown 🙁 fruit 🍇
frying 🍳 fuel ⛽ fuji 🗻 full 💯 game 🏐 garden 🏡
garlic 🧄 gas ⛽ gear ⚙ geek 🤓 gem 💎 gene 🧬
genie 🧞 ghost 👻 gift 🧧 ginger 🦰 girl 👧 glass 🥛
globe 🌍 glove 🥎 gloves 🧤 glow 🌟 goal 🥍 goat 🐐
goblin 👺 gold 🪙 golf 🏌 good 🦸 goofy 🤪 grain 🌾
grape 🍇 grapes 🍇 graph 💹 grave 🪦 gray 🦳 green 💚
grin 😀 groom 🤵 grow 🪴 growth 💹 guard 💂 guide 🦮
guitar 🎸 gun 🔫 gyro 🥙 hair 👱 halo 😇 hammer 🔨
hand 👋 happy 🙋 hashi 🥢 hat 🤠 head 🗣 hear 🙉
heart 🫀 hearts 🥰 heavy 🪨 heel 👠 hello 🫂 helmet 🪖
help 💁 herb 🌿 herd 🦬 hero 🦸 hidden 🥷 hijab 🧕
hike 🚶 hiking 🥾 hindu 🛕 hippo 🦛 hit 🎯 hocho 🔪
hockey 🏑 hoist 🛗 hold 🧑‍🤝‍🧑 hole 🕳 home 🏠 honey 🍯
hook 🪝 hoop 🏀 hooray 🙌 horn 🥳 horns 😈 horse 🏇
hot 🥵 hotdog 🌭 hotel 🛌 house 🪴 houses 🏘 hug 🫂
hump 🐪 hurt 🤕 hushed 😯 hut 🛖 i ℹ ice 🍦
id 🆔 idea 💡 ill 🤒 imp 👿 inbox 📥 index 👈
injury 🤕 ink 🔏 input 🔠 insect 🪲 inside 💠 iron 🧇
ironic 😼 islam 🕌 island 🏝 jack 🎃 jacket 🧥 jeans 👖
jewel 💎 jiaozi 🥟 jigsaw 🧩 jockey 🏇 joey 🦘 joke 😜
joker 🃏 joy 😂 judge 🧑‍⚖ judo 🥋 jug 🏺 juggle 🤹
juice 🥤 jump 🦘 kaaba 🕋 kale 🥬 karate 🥋 kebab 🥙
key 🔐 kick 🦵 kimono 👘 king 👑 kiss 😘 kite 🪁
kiwi 🥝 kneel 🧎 knife 🍽 knit 🧶 knobs 🎛 knot 🪢
koala 🐨 lab 🧪 label 🏷 ladder 🪜 lamp 🪔 laptop 💻
large 🦣 lather 🧼 latin 🔠 laugh 😆 lavash 🫓 lazy 🦥
leaf 🌿 ledger 📒 left ◀ leg 🦵 lemon 🍋 letter 💌
level 🎚 lie 🤥 life 🧬 lift 🛗 lifter 🏋 light 🪶
limb 🦵 link 🖇 lion 🦁 lips 💋 liquor 🥃 litter 🚮
lizard 🦎 llama 🦙 loaf 🍞 lock 🔓 locked 🔒 locker 🛅
log 🪵 loop ➰ lorry 🚛 lotion 🧴 loud 🔊 love 😍
low 🔅 luck 🤞 lumber 🪚 lungs 🫁 m Ⓜ mad 😡
mage 🧙 maggot 🪰 magic 🪄 magnet 🧲 mail 💌 maize 🌽
makeup 💄 male 🐏 man 👨 mango 🥭 map 🗺 maple 🍁
mark ❣ marker 📑 mask 😷 mate 🧉 math ➕ maze 🌽
meat 🍖 medal 🎖 medium 🔉 meh 😐 melon 🍈 melted 🫕
memo 📝 men 👯‍♂ mercy 🥺 merman 🧜 metal 🪙 metro 🚇
mic 🎙 milk 🧋 mining ⛏ minus ➖ mirror 🪞 moai 🗿
mobile 📱 mode 📳 molusc 🦑 money 🪙 monkey 🙈 moon 🌑
mortar 🧱 mosque 🕌 mother 🤶 motor 🛵 mouse 🐭 mouth 😃
movie 🎥 moyai 🗿 mug 🍺 munch 😱 muscle 💪 museum 🖼
music 🎼 mute 🔇 naan 🫓 nail 💅 name 📛 nazar 🧿
neck 🧣 needle 🪡 nerd 🤓 net 🥅 new 🆕 news 📰
ng 🆖 nib ✒ night 🌃 nine 🕘 ninja 🥷 no ⛔
noodle 🍜 north ⬆ nose 🥸 not ⛔ note 🎵 notes 🎶
nurse 🧑‍⚕ nut 🥜 o ⭕ ocean 🌊 oden 🍢 off 📴
ogre 👹 oh 🙀 oil 🛢 old 🧓 olive 🫒 om 🕉
on 🔛 once 🔂 one 🕐 onion 🧅 open 😃 orange 🧡
organ 🫀 otter 🦦 outbox 📤 owl 🦉 ox 🐂 oyster 🦪
pad 🗒 paddle 🏓 paella 🥘 page 📃 pager 📟 pail 🪣
palm 🤦 pan 🍳 panda 🐼 pants 👖 paper 📜 parcel 📦
park 🏞 parlor 💇 parrot 🦜 part 〽 party 🪅 pasta 🍝
pastry 🍥 patrol 🚓 pause ⏯ paw 🐾 pc 💻 peace 🕊
peach 🍑 peahen 🦚 peanut 🥜 pear 🍐 pearl 🧋 pen ✒
pencil ✏ pepper 🫑 person 🧑 pest 🪰 pester 🦡 pet 🐶
phone 🤳 piano 🎹 pick ⛏ picket 🪧 pickle 🥒 pickup 🛻
picnic 🧺 pie 🥧 piece 🧩 pig 🐷 pill 💊 pilot 🧑‍✈
pin 📌 pine 🎍 pink 🏳‍⚧ pirate 🦜 pistol 🔫 pita 🫓
pizza 🍕 plane 🧑‍✈ plant 🪴 plate 🍽 play ▶ please 🙏
plug 🔌 plus ➕ plush 🧸 point 👈 pole 💈 police 👮
polish 💅 polo 🤽 poo 💩 poodle 🐩 poop 💩 popper 🎉
porous 🧽 post 🏣 postal 📯 pot 🫕 potato 🥔 pouch 👝
pound 💷 prawn 🍤 pray 🙏 prayer 🤲 pretty 🦋 pride 🏳‍🌈
prince 🤴 print 👣 prize 🏆 proof 🧾 proud 🥲 puck 🏒
pulse 🫀 pump ⛽ punch ✊ purple 💜 purse 👛 puzzle 🧩
queen 👑 quench 🧯 quiet 🤫 r ® rabbit 🐰 racing 🏃‍♂
radio 📻 rage 😡 rain ⛈ raised 🤚 ram 🐏 ramen 🍜
rat 🐀 rays ☀ razor 🪒 record ⏺ red 😡 reload 🔃
repeat 🔁 resort ⛵ rewind ⏪ rhythm 🪘 ribbon 💝 rice 🌾
right ▶ ring 💍 roach 🪳 road 🛣 robot 🤖 rock 🪨
rocket 🧑‍🚀 roll 🥐 rolled 🗞 roller 🛼 rope 🪢 rose 🌹
rugby 🏉 ruler 📏 rung 🪜 rushed 😰 russia 🪆 sad 😢
safety 🦺 sake 🍶 salad 🥗 salon 💆 salt 🧂 sand ⌛
sandal 👡 santa 🎅 sari 🥻 sash 🎽 sassy 💁 saturn 🪐
sauna 🧖 saw 🪚 sax 🎷 scale ⚖ scales 🧑‍⚖ scared 😨
scarf 🧣 school 🏫 score 💯 scream 😱 screw 🪛 scroll 📜
scuba 🤿 sea ⛵ seal 🦭 search 🔍 seat 💺 second 🥈
secure 🔐 see 🙈 selfie 🤳 semi 🚛 sent 📤 set 📐
seven 🕖 sewing 🪡 shake 🤝 shaker 🧂 shark 🦈 sharp 🪒
shave 🪒 shaved 🍧 shaven 🦲 sheep 🐏 shell 🐚 shield 🛡
shinto ⛩ ship ⚓ shirt 🎽 shoe 👞 shorts 🩳 shot 🥃
shower 🚿 shrimp 🍤 shrine ⛩ shrug 🤷 shush 🤫 sick 😷
sign 🪧 signal 🚥 silent 😶 silver 🪙 singer 🧑‍🎤 sit 🪑
six 🕕 skate 🛼 skewer 🍢 ski ⛷ skier ⛷ skill 🤹
skis 🎿 skull 💀 skunk 🦨 sled 🛷 sledge 🛷 sleep 😪
sleigh 🛷 sleuth 🕵 slice 🍕 slider 🎚 slot 🎰 sloth 🦥
slow 🦥 sly 🦝 small 🤪 smile 😃 smirk 😏 snail 🐌
snake 🐍 snare 🪤 sneeze 🤧 snow ⛷ soap 🧼 soar 🪁
sob 😭 soccer ⚽ socks 🧦 soda 🥤 soft 🍦 solid 🪨
soon 🔜 sorry 🙇 sos 🆘 south ⬇ sow 🐖 space 🛰
speak 🙊 speech 💬 speed 🚄 spider 🕷 spiny 🦔 spiral 🐚
split 🪓 spock 🖖 sponge 🧽 spool 🧵 spoon 🥄 spots 🦒
spy 🕵 square ⏹ squid 🦑 staff ⚕ stand 🧍 star 🤩
statue 🗽 steak 🥩 steam 🚂 step 🪜 stew 🍲 stick 🍢
stink 🦨 stomp 🦶 stone 🪨 stop 🚏 store 🏪 straw 🧃
string 🧵 stripe 🦓 studio 🎙 stuffy 🧐 subway 🚇 suit 🕴
sun 😎 sunny ☀ sunset 🌆 sushi 🍣 swan 🦢 sweat 😅
sweet 🍠 swim 🏊 swirl 🍥 sword 🤺 swords ⚔ tabs 📑
taco 🌮 tada 🎉 talk 🦜 tamale 🫔 tao ☯ taoist ☯
tape 📼 target 🎯 taste 😝 taxi 🚕 tea 🧋 teacup 🍵
teapot 🫖 tear 🥲 teeth 🪥 teller 🏧 temple 🛕 ten 🕙
tennis 🎾 tent ⛺ thanks 🫂 third 🥉 thirty 🕧 thongs 🩴
thread 🧵 three 🕒 thumb 👍 tichel 🧕 ticket 🎟 tie 🪢
tiger 🐯 timber 🪵 timer ⌛ tipsy 🥴 tired 😩 tm ™
toilet 🪠 tomato 🍅 tongue 😛 tool 🪚 tooth 🦷 top 🎩
tophat 🎩 torch 🔦 tower 🗼 toy 🪀 train 🚂 tram 🚃
trap 🪤 travel 🧳 tray 📤 tree 🌲 trend 📈 trophy 🏆
truck 🛻 tshirt 👕 tulip 🌷 turban 👳 turkey 🦃 turtle 🐢
tusk 🦣 tuxedo 🤵 tv 📺 twelve 🕛 twine 🪢 twins 👬
twist 🪢 two 🕑 ufo 👽 undead 🧛 unlock 🔓 up 👆
upward 📈 urn ⚱ v ✌ vat 🪣 veil 👰 versus 🆚
vest 🦺 vhs 📼 vice 🗜 video 📻 view 🪟 violin 🎻
virus 🦟 vomit 🤢 vs 🆚 vulcan 🖖 waffle 🧇 walk 🚶
wall 🧱 waning 🌖 watch ⌚ water 🤽 wave 👋 waving 👋
wavy 〰 waxing 🌒 wc 🚹 weapon 🔪 weary 😩 web 🕸
weight 🏋 west ⬅ whale 🐳 wheel 🎡 whew 😥 whisky 🥃
white 🤍 whoops 🤭 wicked 🖤 wilted 🥀 wind 🍃 window 🪟
wine 🍷 wings 💸 wink 😉 wise 🦉 wisent 🦬 witch 🪄
wizard 🪄 wolf 🐺 woman 👩 women 👯‍♀ won 😤 wood 🪵
wool 🦙 woolly 🦣 worker 🧑‍🏭 world 🌍 worm 🪱 wrap 🌯
wrench 🛠 write ✍ wry 😼 x ✖ yacht ⛵ yang ☯
yarn 🧶 yawn 🥱 yellow 💛 yen 💴 yin ☯ yoga 🧘
young 👶 yum 😋 yurt 🛖 zap ⚡ zebra 🦓 zipper 🤐
zodiac 👧 zombie 🧟 zzz 😴
"""


def _build_table() -> dict[str, str]:
    tokens = _DATA.split()
    if len(tokens) % 2:
        raise ValueError("emoji table has an unpaired entry")
    return dict(sorted(zip(tokens[0::2], tokens[1::2])))


_TABLE = _build_table()
_WORDS = tuple(_TABLE)


def english_emoji(word: str) -> str:
    """Emoji for the exact keyword ``word``; raises KeyError if unknown."""
    try:
        return _TABLE[word]
    except KeyError:
        raise KeyError(f"no emoji for {word!r}") from None


def english_emoji_matches(prefix: str) -> list[tuple[str, str]]:
    """All (keyword, emoji) pairs whose keyword starts with ``prefix``, in keyword order."""
    matches = []
    for word in _WORDS[bisect_left(_WORDS, prefix):]:
        if not word.startswith(prefix):
            break
        matches.append((word, _TABLE[word]))
    return matches