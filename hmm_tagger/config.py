# --- Model ---
START = '#'                # sentinel tag for the state before the first word
UNSEEN_PENALTY = -100.0    # emission log-score for a word never seen under a tag

# --- File Paths ---
MODEL_PATH = 'model.pkl'
TRAIN_TAGS_PATH = 'texts/brown-train-tags.txt'
TRAIN_SENTENCES_PATH = 'texts/brown-train-sentences.txt'
TEST_TAGS_PATH = 'texts/brown-test-tags.txt'
TEST_SENTENCES_PATH = 'texts/brown-test-sentences.txt'

# --- Corpora ---
BROWN_TAGSET = 'universal'

# --- Console ---
EXIT_COMMAND = 'exit'
PROMPT = 'Please enter the test: '

# --- Logging ---
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
