from splitledger import create_app
app = create_app()
if __name__ == "__main__":
    print("\n" + "="*50)
    print("STARTING SPLITLEDGER API ON 0.0.0.0:5000")
    print("="*50 + "\n")
    app.run(host='0.0.0.0', port=5000, debug=True)
