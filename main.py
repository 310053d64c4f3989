# uvicorn - server to post and run
# uvicorn api.app:app --reload


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.app:app", host="0.0.0.0", port=8000, reload=True)
