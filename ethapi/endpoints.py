class RPCMethod:
    eth_coinbase = "eth_coinbase"
    eth_mining = "eth_mining"
    eth_accounts = "eth_accounts"
    eth_blockNumber = "eth_blockNumber"
    eth_gasPrice = "eth_gasPrice"
    eth_number = "eth_number"

    eth_getBalance = "eth_getBalance"
    eth_getStorageAt = "eth_getStorageAt"
    eth_getCode = "eth_getCode"
    eth_getCompilers = "eth_getCompilers"

    eth_getBlockByHash = "eth_getBlockByHash"
    eth_getBlockByNumber = "eth_getBlockByNumber"
    eth_getUncleByBlockHashAndIndex = "eth_getUncleByBlockHashAndIndex"
    eth_getUncleByBlockNumberAndIndex = "eth_getUncleByBlockNumberAndIndex"
    eth_getBlockTransactionCountByHash = "eth_getBlockTransactionCountByHash"
    eth_getBlockTransactionCountByNumber = "eth_getBlockTransactionCountByNumber"
    eth_getUncleCountByBlockHash = "eth_getUncleCountByBlockHash"
    eth_getUncleCountByBlockNumber = "eth_getUncleCountByBlockNumber"

    eth_getTransactionByHash = "eth_getTransactionByHash"
    eth_getTransactionByBlockHashAndIndex = "eth_getTransactionByBlockHashAndIndex"
    eth_getTransactionByBlockNumberAndIndex = "eth_getTransactionByBlockNumberAndIndex"
    eth_getTransactionCount = "eth_getTransactionCount"

    eth_call = "eth_call"
    eth_sendTransaction = "eth_sendTransaction"

    eth_compileSolidity = "eth_compileSolidity"
    eth_compileLLL = "eth_compileLLL"
    eth_compileSerpent = "eth_compileSerpent"

    eth_flush = "eth_flush"

    # superseded by the net_* namespace
    eth_setListening = "eth_setListening"
    net_listening = "net_listening"
    net_peerCount = "net_peerCount"
