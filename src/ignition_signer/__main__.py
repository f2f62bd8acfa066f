from ignition_signer.app import main

main()
