import uvicorn

if __name__ == "__main__":
    # Only for local development; put a TLS-terminating proxy in front in production
    uvicorn.run("main:app", host="0.0.0.0", port=8000, proxy_headers=False)
