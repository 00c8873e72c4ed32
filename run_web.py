#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
웹 버전 CPU 스케줄러 시뮬레이터 실행 파일
서버 시작 후 브라우저에서 API 문서가 자동으로 열립니다.
"""

import sys
import socket
import threading
import webbrowser

import uvicorn


def is_port_in_use(port):
    """포트가 사용 중인지 확인"""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex(('localhost', port)) == 0


def main(port=8000, open_browser=True):
    url = f"http://localhost:{port}/docs"

    print("=" * 60)
    print("       CPU 스케줄러 시뮬레이터 - 웹 버전")
    print("=" * 60)

    if is_port_in_use(port):
        print(f"\n⚠️  포트 {port}이 이미 사용 중입니다. 기존 서버를 종료한 뒤 다시 실행하세요.")
        sys.exit(1)

    print(f"\n🚀 서버 시작 중... (포트: {port})")
    print(f"🌐 API 문서: {url}")
    print("종료하려면 Ctrl+C를 누르세요.")
    print("-" * 60 + "\n")

    if open_browser:
        threading.Timer(1.5, webbrowser.open, args=(url,)).start()

    uvicorn.run("web.backend.app:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
