import streamlit as st

from hmm_tagger import config
from hmm_tagger.accuracy import tagged_frame
from hmm_tagger.errors import DeadEndError
from hmm_tagger.hmm import HiddenMarkovModel


@st.cache_resource
def load_model(path=config.MODEL_PATH):
    return HiddenMarkovModel.from_file(path)


st.set_page_config(
    page_title="POS Tagging with Hidden Markov Model",
    layout="wide",
    initial_sidebar_state="expanded",
)

model = load_model()

st.title('POS Tagger')
st.markdown('Interface to predict part of speech tag for each word of a given sentence using Hidden Markov Model')

penalty, input = st.columns(2)

with penalty:
    st.header("Settings")
    unseen_penalty = st.number_input('Unseen word log-score', value=config.UNSEEN_PENALTY, step=10.0)
    st.caption(f"{len(model.tags)} tags in the trained model")

with input:

    st.header("Predict Tags")
    sentence = st.text_input('Enter Input Sentence')

    if st.button("Predict POS Tags"):
        st.subheader("Result :")
        try:
            st.table(tagged_frame(model, sentence, unseen_penalty))
        except DeadEndError as e:
            st.error(f"Could not tag this sentence: {e}")
