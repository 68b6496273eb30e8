"""`python -m kuma_relay` 로 서버 실행"""

from kuma_relay.main import run

if __name__ == "__main__":
    run()
