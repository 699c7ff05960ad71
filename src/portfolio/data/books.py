from portfolio.models import Book, BookStatus

_UP_NEXT = BookStatus.UP_NEXT
_READING = BookStatus.READING
_FINISHED = BookStatus.FINISHED

BOOKS: tuple[Book, ...] = (
    Book(title="Homegoing", author="Yaa Gyasi", status=_UP_NEXT),
    Book(title="The Leavers", author="Lisa Ko", status=_READING),
    Book(title="Go in Practice", author="N.Kozyra, et al", status=_READING),
    Book(title="Little Fires Everywhere", author="Celeste Ng", status=_FINISHED),
    Book(title="Children of Blood & Bone", author="Tomi Adeyemi", status=_FINISHED),
    Book(title="A Little Life", author="Hanya Yanagihara", status=_FINISHED),
    Book(title="The Three-Body Problem", author="Cixin Liu", status=_FINISHED),
    Book(title="The Vagrants", author="Yiyun Li", status=_FINISHED),
    Book(title="A Minor Chorus", author="Billy-Ray Belcourt", status=_FINISHED),
    Book(title="Co-existence", author="Billy-Ray Belcourt", status=_FINISHED),
    Book(title="The Handmaid's Tale", author="Margaret Atwood", status=_FINISHED),
    Book(title="Normal People", author="Sally Rooney", status=_FINISHED),
    Book(title="Where The Crawdads Sing", author="Delia Owens", status=_FINISHED),
    Book(title="Black Matter", author="Blake Crouch", status=_FINISHED),
    Book(title="Carrie", author="Stephen King", status=_FINISHED),
    Book(title="Sleeping Beauty", author="Stephen King, Owen King", status=_FINISHED),
    Book(title="Tattooist of Auschwitz", author="Heather Morris", status=_FINISHED),
    Book(title="Fifty Fifty", author="James Patterson, Candice Fox", status=_FINISHED),
)
