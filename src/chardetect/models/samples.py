"""Reference texts the bigram models and CJK frequency sets are built from."""

# Latin script, ISO-8859-1 / windows-1252 repertoire.
WESTERN: dict[str, str] = {
    "en": (
        "The quick brown fox jumps over the lazy dog. It was the best of times "
        "and the worst of times, and everyone in the town knew that the summer "
        "would bring many visitors to the old house near the river. She said "
        "that they should have been there when the results were announced, but "
        "nobody could find the way through the crowded streets of the city. "
        "This is a simple test of the language model, with the most common "
        "words of the English language and their usual order."
    ),
    "fr": (
        "Le petit garçon était assis près de la fenêtre et regardait tomber la "
        "neige. Il pensait à l'été dernier, quand toute la famille était partie "
        "en vacances au bord de la mer. Les journées étaient longues et très "
        "chaudes, et le soir on mangeait des crêpes au café du village. "
        "Aujourd'hui, la ville est calme et les rues sont presque désertes, "
        "mais il espère que ses amis viendront bientôt. Où est passé le temps "
        "où l'on pouvait rêver sans se soucier de la vie?"
    ),
    "de": (
        "Die Größe des Gebäudes überraschte die Besucher. Natürlich können wir "
        "das ändern, wenn es nötig ist. Im Frühling fahren viele Familien mit "
        "dem Zug in die Berge, um dort ein paar ruhige Tage zu verbringen. Die "
        "Straßen der alten Stadt sind schmal, und überall gibt es kleine "
        "Geschäfte, in denen man Käse, Brot und Äpfel kaufen kann. Über die "
        "Brücke gehen jeden Morgen die Kinder zur Schule."
    ),
    "es": (
        "El niño pequeño vivía en una casa cerca del río con su familia. Cada "
        "mañana caminaba hasta la escuela y saludaba a los vecinos que "
        "trabajaban en el campo. Después de las clases, jugaba con sus amigos "
        "en la plaza del pueblo hasta que el sol se escondía detrás de las "
        "montañas. ¿Quién sabe qué aventuras traerá el próximo año? La vida "
        "allí era tranquila y feliz, y todos los días parecían iguales."
    ),
    "it": (
        "La città era ancora addormentata quando il treno arrivò alla stazione. "
        "Il giovane scese con la sua valigia e guardò le case colorate lungo il "
        "fiume. Più tardi andò al caffè della piazza, dove un vecchio amico lo "
        "aspettava da più di un'ora. Parlarono della famiglia, del lavoro e di "
        "quello che era successo negli ultimi anni, perché non si vedevano da "
        "molto tempo. Così passò la giornata, tra ricordi e progetti."
    ),
    "pt": (
        "A cidade acordou cedo naquele dia de verão. As crianças correram para "
        "a praia enquanto os pais preparavam o almoço em casa. Não havia nuvens "
        "no céu e o mar estava calmo. À tarde, a família visitou a avó, que "
        "contou histórias da sua juventude e das viagens que fez com o avô pelo "
        "interior do país. Foi uma ocasião muito especial para todos, e ninguém "
        "esqueceu aquele dia."
    ),
    "nl": (
        "De kleine jongen woonde met zijn ouders in een huis aan de rand van "
        "het dorp. Elke ochtend fietste hij naar school, ook als het regende of "
        "als de wind hard waaide. Na school speelde hij met zijn vrienden in het "
        "park, en 's avonds hielp hij zijn moeder in de keuken. Het leven was "
        "eenvoudig, maar zij waren gelukkig en tevreden met wat zij hadden. Een "
        "café op de hoek verkocht de beste koffie van de streek."
    ),
    "sv": (
        "Den lilla flickan bodde i ett rött hus vid sjön tillsammans med sina "
        "föräldrar. På sommaren badade hon varje dag och på vintern åkte hon "
        "skridskor på isen. Hennes morfar brukade berätta sagor om troll och "
        "älvor som levde i skogen bakom gården. Det var en lycklig tid, och hon "
        "tänker ofta tillbaka på de långa ljusa kvällarna när solen aldrig gick "
        "ner och alla var ute till sent på natten."
    ),
}

# Latin script, ISO-8859-2 / windows-1250 repertoire.
CENTRAL_EUROPEAN: dict[str, str] = {
    "cs": (
        "Malý chlapec bydlel se svými rodiči v domě blízko řeky. Každé ráno "
        "chodil do školy a zdravil sousedy, kteří pracovali na poli. Po "
        "vyučování si hrál s přáteli na náměstí, dokud slunce nezapadlo za "
        "hory. Večer pomáhal matce v kuchyni a poslouchal, jak otec vypráví "
        "příběhy o tom, jak žili lidé v dávných dobách. Život tam byl klidný a "
        "šťastný a všichni se měli rádi."
    ),
    "pl": (
        "Mały chłopiec mieszkał z rodzicami w domu niedaleko rzeki. Każdego "
        "ranka chodził do szkoły i pozdrawiał sąsiadów, którzy pracowali w "
        "polu. Po lekcjach bawił się z przyjaciółmi na rynku, aż słońce "
        "schowało się za górami. Wieczorem pomagał matce w kuchni i słuchał, "
        "jak ojciec opowiada historie o dawnych czasach. Życie było tam "
        "spokojne i szczęśliwe, a wszyscy się znali."
    ),
    "hu": (
        "A kisfiú a szüleivel egy házban lakott a folyó közelében. Minden "
        "reggel iskolába ment, és köszönt a szomszédoknak, akik a földeken "
        "dolgoztak. Tanítás után a barátaival játszott a téren, amíg a nap le "
        "nem bukott a hegyek mögött. Este segített az édesanyjának a "
        "konyhában, és hallgatta, ahogy az apja régi időkről mesél. Az élet "
        "ott nyugodt és boldog volt, és ő még most is szívesen gondol rá."
    ),
}

# Latin script, ISO-8859-9 / windows-1254 repertoire.
TURKISH: dict[str, str] = {
    "tr": (
        "Küçük çocuk ailesiyle birlikte nehrin yakınındaki bir evde "
        "yaşıyordu. Her sabah okula yürüyerek gider ve tarlada çalışan "
        "komşularını selamlardı. Derslerden sonra güneş dağların arkasında "
        "kaybolana kadar arkadaşlarıyla meydanda oynardı. Akşamları annesine "
        "mutfakta yardım eder, babasının eski zamanlar hakkında anlattığı "
        "hikâyeleri dinlerdi. Orada hayat sakin ve mutluydu, ışıklı günler "
        "birbirini izliyordu."
    ),
}

CYRILLIC: dict[str, str] = {
    "ru": (
        "Маленький мальчик жил с родителями в доме недалеко от реки. Каждое "
        "утро он ходил в школу и здоровался с соседями, которые работали в "
        "поле. После уроков он играл с друзьями на площади, пока солнце не "
        "садилось за горы. Вечером он помогал матери на кухне и слушал, как "
        "отец рассказывает истории о том, как жили люди в давние времена. "
        "Жизнь там была спокойной и счастливой, и всё было хорошо. Привет "
        "всем, кто читает этот текст на русском языке."
    ),
}

GREEK: dict[str, str] = {
    "el": (
        "Το μικρό αγόρι ζούσε με τους γονείς του σε ένα σπίτι κοντά στο "
        "ποτάμι. Κάθε πρωί πήγαινε στο σχολείο και χαιρετούσε τους γείτονες "
        "που δούλευαν στα χωράφια. Μετά το μάθημα έπαιζε με τους φίλους του "
        "στην πλατεία, μέχρι να δύσει ο ήλιος πίσω από τα βουνά. Το βράδυ "
        "βοηθούσε τη μητέρα του στην κουζίνα και άκουγε τον πατέρα του να "
        "λέει ιστορίες για τα παλιά χρόνια. Η ζωή εκεί ήταν ήσυχη και "
        "ευτυχισμένη."
    ),
}

HEBREW: dict[str, str] = {
    "he": (
        "הילד הקטן גר עם הוריו בבית ליד הנהר. כל בוקר הוא הלך לבית הספר "
        "ובירך את השכנים שעבדו בשדות. אחרי השיעורים הוא שיחק עם החברים שלו "
        "בכיכר עד שהשמש שקעה מאחורי ההרים. בערב הוא עזר לאמא שלו במטבח "
        "והקשיב לאבא שלו מספר סיפורים על הימים הישנים. החיים שם היו שקטים "
        "ומאושרים, וכולם אהבו את הכפר הקטן."
    ),
}

ARABIC: dict[str, str] = {
    "ar": (
        "كان الولد الصغير يعيش مع والديه في بيت قريب من النهر. كل صباح كان "
        "يذهب إلى المدرسة ويسلم على الجيران الذين يعملون في الحقول. بعد "
        "الدروس كان يلعب مع أصدقائه في الساحة حتى تغيب الشمس وراء الجبال. في "
        "المساء كان يساعد أمه في المطبخ ويستمع إلى أبيه وهو يحكي قصصا عن "
        "الأيام القديمة. كانت الحياة هناك هادئة وسعيدة."
    ),
}

# Frequent characters per CJK language.  A multi-byte recognizer counts how
# many decoded characters fall in its language's set.
COMMON_JAPANESE = (
    "のにはをたがでてとしれさあいうえおかきくけこすせそつなねまもやよらりるんっ"
    "ーアイクスタトルンリ日本人大年一中事出時行見月分後前生間上国会社自世界語私"
    "今言思東京何話文字化試験"
)

COMMON_KOREAN = (
    "이다는의에가을를하고서지한나도요세안녕그사기로것수있없니까습되게대우리해"
    "라어시내면들만국말오늘사람학교한국어"
)

COMMON_SIMPLIFIED_CHINESE = (
    "的一是不了人我在有他这中大来上国个到说们为子和你地出道也时年得就那要下以"
    "生会自着去之过家学对可她里后小么心多天而能好都然没日于起还发成事只作当想"
    "看文无开手十用主行方又如前所本见经头面公同三已老从动两长知民样现分世界测"
    "试"
)

COMMON_TRADITIONAL_CHINESE = (
    "的一是不了人我在有他這中大來上國個到說們為子和你地出道也時年得就那要下以"
    "生會自著去之過家學對可她裡後小麼心多天而能好都然沒日於起還發成事只作當想"
    "看文無開手十用主行方又如前所本見經頭面公同三已老從動兩長知民樣現分世界測"
    "試"
)
