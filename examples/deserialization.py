from spaceapi.utils.codec import decode
from spaceapi.utils.errors import DecodeError

INPUT = (
    '{"api":"0.13","space":"coredump","logo":"https://www.coredump.ch/logo.png",'
    '"url":"https://www.coredump.ch/","location":{"lat":47.22936,"lon":8.82949},'
    '"contact":{"irc":"irc://freenode.net/#coredump","twitter":"@coredump_ch",'
    '"foursquare":"525c20e5498e875d8231b1e5","email":"danilo@coredump.ch"},'
    '"issue_report_channels":["email","twitter"],"state":{"open":null},'
    '"ext_ccc":"chaostreff"}'
)


def load_status(text):
    try:
        status = decode(text)
        print(repr(status))
    except DecodeError as e:
        print(f"Could not parse status: {e}")


if __name__ == "__main__":
    load_status(INPUT)
